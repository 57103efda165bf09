"""Frame output helpers for the on-disk display emulator."""

from __future__ import annotations

import os
from pathlib import Path

from src.rendering.frame_data import Frame

SUFFIXES = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


def frame_path(frame: Frame, path: str = "emulator_output/frame") -> Path:
    """Return the output path with an extension matching the frame's content type."""
    return Path(path).with_suffix(SUFFIXES.get(frame.content_type, ".img"))


def save_frame(frame: Frame, path: str = "emulator_output/frame") -> Path:
    """Write the frame bytes to disk, replacing the previous frame atomically."""
    output_path = frame_path(frame, path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    partial_path = output_path.with_name(output_path.name + ".part")
    partial_path.write_bytes(frame.data)
    os.replace(partial_path, output_path)
    return output_path


__all__ = ["frame_path", "save_frame"]
