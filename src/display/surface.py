"""Display state and the single visible frame slot."""

from __future__ import annotations

from enum import Enum
import logging
import threading
from typing import Callable

from src.rendering.frame_data import Frame

logger = logging.getLogger(__name__)

FrameSink = Callable[[Frame], None]


class DisplayState(Enum):
    """Which view of the page is visible."""

    LOADING = "loading"
    AWAITING_CREDENTIALS = "init-session"
    PLAYING = "play-images"


class DisplaySurface:
    """Owns the visible view and the currently displayed frame.

    Frames are written only through show_frame; the last call wins. Sinks are
    notified after every write and may mirror the frame elsewhere (disk, web).
    """

    def __init__(self, placeholder: Frame) -> None:
        self._placeholder = placeholder
        self._lock = threading.Lock()
        self._render_lock = threading.Lock()
        self._state = DisplayState.LOADING
        self._frame = placeholder
        self._device_address = ""
        self._sinks: list[FrameSink] = []

    @property
    def placeholder(self) -> Frame:
        return self._placeholder

    @property
    def state(self) -> DisplayState:
        with self._lock:
            return self._state

    @property
    def device_address(self) -> str:
        with self._lock:
            return self._device_address

    def current_frame(self) -> Frame:
        """Return the frame currently visible."""
        with self._lock:
            return self._frame

    def add_sink(self, sink: FrameSink) -> None:
        self._sinks.append(sink)

    def switch(self, next_state: DisplayState) -> None:
        """Hide the current view and show next_state."""
        with self._lock:
            previous = self._state
            self._state = next_state
        logger.info("Display state %s -> %s", previous.value, next_state.value)

    def set_device_address(self, address: str) -> None:
        with self._lock:
            self._device_address = address

    def show_frame(self, frame: Frame, stop_event: threading.Event | None = None) -> None:
        """Make frame the visible image, replacing whatever was shown.

        The write is skipped when stop_event is already set.
        """
        with self._render_lock:
            if stop_event is not None and stop_event.is_set():
                return
            with self._lock:
                self._frame = frame
            for sink in list(self._sinks):
                try:
                    sink(frame)
                except Exception:
                    logger.exception("Frame sink %r failed", sink)

    def show_placeholder(self) -> None:
        self.show_frame(self._placeholder)

    def reset(self) -> None:
        """Return to the freshly loaded page: loading view, placeholder, no device."""
        with self._lock:
            self._state = DisplayState.LOADING
            self._device_address = ""
        self.show_placeholder()


__all__ = ["DisplayState", "DisplaySurface", "FrameSink"]
