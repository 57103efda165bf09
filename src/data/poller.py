"""Threaded poller that fetches device frames on a fixed cadence."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import threading

from src.data.frame_client import FrameClient, FrameClientError
from src.display.surface import DisplayState, DisplaySurface
from src.rendering.frame_data import Frame
from src.session.codec import Session

logger = logging.getLogger(__name__)


@dataclass
class PollHandle:
    """Cancellation handle for a running poll schedule."""

    stop_event: threading.Event
    thread: threading.Thread

    @property
    def active(self) -> bool:
        return self.thread.is_alive() and not self.stop_event.is_set()

    def cancel(self) -> None:
        """Stop scheduling new ticks; ticks already in flight finish without rendering."""
        self.stop_event.set()

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


class FramePoller:
    """Background poller that renders the device's latest frame every interval.

    Ticks run in their own threads and are not serialized: a slow fetch may
    complete after a faster later one, and whichever renders last is what
    stays visible.
    """

    def __init__(
        self,
        client: FrameClient,
        surface: DisplaySurface,
        frame_interval_seconds: float = 1.0,
    ) -> None:
        self._client = client
        self._surface = surface
        self._frame_interval_seconds = frame_interval_seconds

    def start(self, session: Session) -> PollHandle:
        """Show the player view with the placeholder and start ticking."""
        self._surface.set_device_address(session.address)
        self._surface.show_placeholder()
        self._surface.switch(DisplayState.PLAYING)

        stop_event = threading.Event()
        thread = threading.Thread(
            target=self._run_loop,
            args=(session, stop_event),
            name=f"frame-poller-{session.address}",
            daemon=True,
        )
        thread.start()
        logger.info(
            "Polling %s every %.3gs", session.address, self._frame_interval_seconds
        )
        return PollHandle(stop_event=stop_event, thread=thread)

    def poll_once(self, session: Session) -> Frame | None:
        """Fetch one frame; None means the placeholder should be shown."""
        try:
            frame = self._client.fetch_frame(session)
        except FrameClientError as exc:
            logger.debug("No frame from %s: %s", session.address, exc)
            return None
        if not frame.data:
            logger.debug("Empty frame from %s", session.address)
            return None
        return frame

    def render(self, result: Frame | None, stop_event: threading.Event | None = None) -> None:
        """Install result as the visible image, or the placeholder for None.

        Nothing is rendered once stop_event is set, so a cancelled schedule
        cannot overwrite whatever the page shows after it.
        """
        frame = self._surface.placeholder if result is None else result
        self._surface.show_frame(frame, stop_event=stop_event)

    def tick(self, session: Session, stop_event: threading.Event | None = None) -> None:
        result = self.poll_once(session)
        self.render(result, stop_event=stop_event)

    def _run_loop(self, session: Session, stop_event: threading.Event) -> None:
        while not stop_event.wait(timeout=self._frame_interval_seconds):
            threading.Thread(
                target=self.tick, args=(session, stop_event), daemon=True
            ).start()
        logger.info("Stopped polling %s", session.address)


__all__ = ["FramePoller", "PollHandle"]
