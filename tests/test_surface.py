from __future__ import annotations

import logging

from src.display.surface import DisplayState, DisplaySurface
from src.rendering.frame_data import Frame

PLACEHOLDER = Frame(data=b"placeholder", content_type="image/png")


def test_surface_starts_loading_with_placeholder() -> None:
    surface = DisplaySurface(PLACEHOLDER)

    assert surface.state is DisplayState.LOADING
    assert surface.current_frame() == PLACEHOLDER
    assert surface.device_address == ""


def test_switch_replaces_state() -> None:
    surface = DisplaySurface(PLACEHOLDER)

    surface.switch(DisplayState.AWAITING_CREDENTIALS)
    assert surface.state is DisplayState.AWAITING_CREDENTIALS

    surface.switch(DisplayState.PLAYING)
    assert surface.state is DisplayState.PLAYING


def test_sinks_receive_every_frame() -> None:
    surface = DisplaySurface(PLACEHOLDER)
    received: list[Frame] = []
    surface.add_sink(received.append)

    surface.show_frame(Frame(b"one"))
    surface.show_placeholder()

    assert received == [Frame(b"one"), PLACEHOLDER]


def test_failing_sink_does_not_block_render(caplog) -> None:
    surface = DisplaySurface(PLACEHOLDER)
    received: list[Frame] = []

    def broken(frame: Frame) -> None:
        raise OSError("disk full")

    surface.add_sink(broken)
    surface.add_sink(received.append)

    with caplog.at_level(logging.ERROR):
        surface.show_frame(Frame(b"one"))

    assert surface.current_frame() == Frame(b"one")
    assert received == [Frame(b"one")]
    assert "Frame sink" in caplog.text


def test_reset_returns_to_loading() -> None:
    surface = DisplaySurface(PLACEHOLDER)
    surface.set_device_address("cam1")
    surface.switch(DisplayState.PLAYING)
    surface.show_frame(Frame(b"one"))

    surface.reset()

    assert surface.state is DisplayState.LOADING
    assert surface.device_address == ""
    assert surface.current_frame() == PLACEHOLDER
