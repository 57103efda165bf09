"""Rendering utilities for the frame viewer."""

from src.rendering.emulator import save_frame
from src.rendering.frame_data import Frame
from src.rendering.placeholder import compose_placeholder, placeholder_frame

__all__ = ["Frame", "compose_placeholder", "placeholder_frame", "save_frame"]
