from __future__ import annotations

import base64
import json
import threading
from unittest.mock import MagicMock

import pytest

from src.data.poller import FramePoller
from src.display.surface import DisplayState, DisplaySurface
from src.page import Location, ViewerPage
from src.rendering.frame_data import Frame
from src.session import CredentialInput, Session, decode_session

PLACEHOLDER = Frame(data=b"placeholder", content_type="image/png")
PAGE_URL = "http://localhost/site/p1.html"


def _fragment(payload: str) -> str:
    return "#" + base64.b64encode(payload.encode("utf-8")).decode("ascii")


@pytest.fixture()
def client() -> MagicMock:
    client = MagicMock()
    client.fetch_frame.return_value = Frame(b"jpeg")
    return client


@pytest.fixture()
def surface() -> DisplaySurface:
    return DisplaySurface(PLACEHOLDER)


def _page(url: str, surface: DisplaySurface, client: MagicMock) -> ViewerPage:
    poller = FramePoller(client=client, surface=surface, frame_interval_seconds=60.0)
    return ViewerPage(Location(url), surface, poller)


def test_empty_fragment_shows_credential_form(surface: DisplaySurface, client: MagicMock) -> None:
    page = _page(PAGE_URL, surface, client)

    assert page.init() is None

    assert surface.state is DisplayState.AWAITING_CREDENTIALS
    assert page.session is None
    assert page.handle is None


def test_undecodable_fragment_shows_credential_form(surface: DisplaySurface, client: MagicMock) -> None:
    page = _page(PAGE_URL + _fragment('{"pin":"1234"}'), surface, client)

    assert page.init() is None
    assert surface.state is DisplayState.AWAITING_CREDENTIALS


def test_valid_fragment_starts_polling(surface: DisplaySurface, client: MagicMock) -> None:
    url = PAGE_URL + _fragment('{"address":"10.0.0.5","pin":"1234","auth":""}')
    page = _page(url, surface, client)

    session = page.init()
    try:
        assert session == Session(address="10.0.0.5", pin="1234", auth="")
        assert surface.state is DisplayState.PLAYING
        assert surface.device_address == "10.0.0.5"
        assert surface.current_frame() == PLACEHOLDER
        assert page.handle is not None and page.handle.active
    finally:
        page.close()


def test_valid_fragment_polls_recovered_device(surface: DisplaySurface) -> None:
    poller = MagicMock()
    url = PAGE_URL + _fragment('{"address":"10.0.0.5","pin":"1234","auth":""}')
    page = ViewerPage(Location(url), surface, poller)

    page.init()

    poller.start.assert_called_once_with(Session(address="10.0.0.5", pin="1234", auth=""))


def test_submit_credentials_installs_fragment_and_reloads(surface: DisplaySurface, client: MagicMock) -> None:
    page = _page(PAGE_URL, surface, client)
    page.init()

    href = page.submit_credentials(CredentialInput(address="cam1", pin="9999", auth="tok"))
    try:
        assert href.startswith(PAGE_URL + "#")
        token = page.location.hash[1:]
        assert json.loads(base64.b64decode(token)) == {"address": "cam1", "pin": "9999", "auth": "tok"}
        assert decode_session(token) == Session(address="cam1", pin="9999", auth="tok")
        assert page.session == Session(address="cam1", pin="9999", auth="tok")
        assert surface.state is DisplayState.PLAYING
    finally:
        page.close()


def test_reload_cancels_running_schedule(surface: DisplaySurface, client: MagicMock) -> None:
    url = PAGE_URL + _fragment('{"address":"a","pin":"b"}')
    page = _page(url, surface, client)
    page.init()
    first_handle = page.handle
    surface.show_frame(Frame(b"shown"))

    page.reload()
    try:
        assert first_handle is not None
        assert first_handle.stop_event.is_set()
        assert page.handle is not first_handle
        assert surface.current_frame() == PLACEHOLDER
    finally:
        page.close()


def test_location_hash_accessor() -> None:
    location = Location(PAGE_URL)
    assert location.hash == ""

    location.hash = "#abc="
    assert location.hash == "#abc="
    assert location.href == PAGE_URL + "#abc="

    location.hash = "xyz"
    assert location.href == PAGE_URL + "#xyz"


def test_tick_in_flight_during_reload_does_not_render(surface: DisplaySurface) -> None:
    fetch_started = threading.Event()
    release_fetch = threading.Event()

    class SlowClient:
        def fetch_frame(self, session: Session) -> Frame:
            fetch_started.set()
            release_fetch.wait(timeout=2)
            return Frame(b"old-device-frame")

    poller = FramePoller(client=SlowClient(), surface=surface, frame_interval_seconds=60.0)
    url = PAGE_URL + _fragment('{"address":"10.0.0.5","pin":"1234"}')
    page = ViewerPage(Location(url), surface, poller)
    page.init()
    handle = page.handle
    assert handle is not None

    in_flight = threading.Thread(target=poller.tick, args=(page.session, handle.stop_event))
    in_flight.start()
    assert fetch_started.wait(timeout=2)

    page.location.hash = ""
    page.reload()
    release_fetch.set()
    in_flight.join(timeout=2)

    assert surface.state is DisplayState.AWAITING_CREDENTIALS
    assert surface.current_frame() == PLACEHOLDER
