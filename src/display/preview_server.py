"""Local preview page that shows the visible frame in a browser."""

from __future__ import annotations

import html
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
import threading
from typing import Any

from src.display.surface import DisplayState, DisplaySurface

PAGE_TEMPLATE = """<!doctype html>
<html>
  <head>
    <meta http-equiv="refresh" content="{refresh}">
    <style>
      body {{ background: #111; color: #fff; font-family: sans-serif; }}
      img {{ max-width: 100%; }}
    </style>
    <title>P1 Viewer</title>
  </head>
  <body>
    <h1>{heading}</h1>
    {body}
  </body>
</html>"""


def render_page(surface: DisplaySurface, refresh_seconds: int = 1) -> str:
    """Render the HTML for the current display state."""
    state = surface.state
    if state is DisplayState.PLAYING:
        heading = html.escape(surface.device_address)
        body = '<img src="/frame" alt="Frame">'
    elif state is DisplayState.AWAITING_CREDENTIALS:
        heading = "Waiting for credentials"
        body = "<p>Enter the device credentials in the viewer terminal.</p>"
    else:
        heading = "Loading"
        body = '<img src="/frame" alt="Loading">'
    return PAGE_TEMPLATE.format(refresh=refresh_seconds, heading=heading, body=body)


class PreviewHandler(BaseHTTPRequestHandler):
    surface: DisplaySurface

    def do_GET(self) -> None:  # noqa: N802
        if self.path == "/healthz":
            self._send(200, "text/plain; charset=utf-8", b"ok")
            return

        if self.path == "/frame":
            frame = self.surface.current_frame()
            self._send(200, frame.content_type, frame.data, cache=False)
            return

        if self.path == "/":
            page = render_page(self.surface)
            self._send(200, "text/html; charset=utf-8", page.encode("utf-8"))
            return

        self.send_response(404)
        self.end_headers()

    def _send(self, status: int, content_type: str, body: bytes, cache: bool = True) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        if not cache:
            self.send_header("Cache-Control", "no-store")
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        return


def make_server(surface: DisplaySurface, host: str = "127.0.0.1", port: int = 8080) -> ThreadingHTTPServer:
    """Bind a preview server for surface; port 0 picks a free port."""
    handler = type("BoundPreviewHandler", (PreviewHandler,), {"surface": surface})
    return ThreadingHTTPServer((host, port), handler)


def serve_in_background(server: ThreadingHTTPServer) -> threading.Thread:
    thread = threading.Thread(target=server.serve_forever, name="preview-server", daemon=True)
    thread.start()
    return thread


__all__ = ["PreviewHandler", "make_server", "render_page", "serve_in_background"]
