"""Page-load control flow: recover a session and play, or ask for credentials."""

from __future__ import annotations

import logging

from src.data.poller import FramePoller, PollHandle
from src.display.surface import DisplayState, DisplaySurface
from src.page.location import Location
from src.session.codec import Session, SessionError
from src.session.manager import FRAGMENT_MARKER, CredentialInput, capture_session, recover_session

logger = logging.getLogger(__name__)


class ViewerPage:
    """The viewer page as seen by one browser tab.

    Submitting credentials never hands the session over in memory: the token
    is written into the location fragment and the page reloads, so the
    session is always recovered the same way.
    """

    def __init__(self, location: Location, surface: DisplaySurface, poller: FramePoller) -> None:
        self.location = location
        self.surface = surface
        self._poller = poller
        self._handle: PollHandle | None = None
        self._session: Session | None = None

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def handle(self) -> PollHandle | None:
        return self._handle

    def init(self) -> Session | None:
        """Start playback for the session in the fragment, or show the credential form."""
        try:
            session = recover_session(self.location.hash)
        except SessionError as exc:
            logger.info("Failed to recover session: %s", exc)
            self.init_session()
            return None

        self.play_images(session)
        return session

    def init_session(self) -> None:
        self.surface.switch(DisplayState.AWAITING_CREDENTIALS)

    def play_images(self, session: Session) -> PollHandle:
        self._session = session
        self._handle = self._poller.start(session)
        return self._handle

    def submit_credentials(self, form_input: CredentialInput) -> str:
        """Install the submitted session into the fragment and reload; returns the new URL."""
        token = capture_session(form_input)
        self.location.hash = f"{FRAGMENT_MARKER}{token}"
        self.reload()
        return self.location.href

    def reload(self) -> Session | None:
        """Tear down the running page and initialise it again from the location."""
        self.close()
        self._session = None
        self.surface.reset()
        return self.init()

    def close(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


__all__ = ["ViewerPage"]
