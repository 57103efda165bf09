"""Terminal viewer for a P1 camera bridge."""

from __future__ import annotations

import argparse
import logging
import threading

from src.config import load_config
from src.data.frame_client import FrameClient
from src.data.poller import FramePoller
from src.display import DisplayState, DisplaySurface, make_server, serve_in_background
from src.logging_setup import configure_logging
from src.page import CredentialForm, Location, ViewerPage
from src.page.location import DEFAULT_PAGE_URL
from src.rendering import placeholder_frame, save_frame

logger = logging.getLogger("viewer")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "url",
        nargs="?",
        default=DEFAULT_PAGE_URL,
        help="Viewer URL; a '#<token>' fragment resumes a saved session",
    )
    parser.add_argument("--config", default="config/config.yaml", help="Path to the config file")
    parser.add_argument(
        "--no-server",
        action="store_true",
        help="Disable preview web server",
    )
    parser.add_argument(
        "--no-emulator",
        action="store_true",
        help="Do not write frames to disk",
    )
    args = parser.parse_args()

    try:
        config = load_config(args.config)
    except ValueError as exc:
        logging.basicConfig()
        logger.error("Invalid configuration: %s", exc)
        return 1
    configure_logging(config.log)

    surface = DisplaySurface(
        placeholder_frame(config.display.placeholder_width, config.display.placeholder_height)
    )
    if not args.no_emulator:
        surface.add_sink(lambda frame: save_frame(frame, config.display.output_path))
    if not args.no_server:
        server = make_server(surface, config.display.preview_host, config.display.preview_port)
        serve_in_background(server)
        host, port = server.server_address[:2]
        logger.info("Preview at http://%s:%s/", host, port)

    client = FrameClient(config.viewer.base_url, timeout_seconds=config.viewer.loading_timeout_seconds)
    poller = FramePoller(client, surface, frame_interval_seconds=config.viewer.frame_interval_seconds)
    page = ViewerPage(Location(args.url), surface, poller)
    form = CredentialForm(default_auth=config.viewer.default_auth)

    try:
        page.init()
        while surface.state is DisplayState.AWAITING_CREDENTIALS:
            href = page.submit_credentials(form.read())
            logger.info("Session saved; resume with: %s", href)
        threading.Event().wait()
    except (KeyboardInterrupt, EOFError):
        page.close()
        return 0
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
