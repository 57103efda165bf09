"""Display state and output adapters."""

from src.display.preview_server import make_server, serve_in_background
from src.display.surface import DisplayState, DisplaySurface

__all__ = ["DisplayState", "DisplaySurface", "make_server", "serve_in_background"]
