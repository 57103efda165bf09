"""Client for the camera bridge's still-frame endpoint."""

from __future__ import annotations

import time

import requests
import urllib3

from src.rendering.frame_data import DEFAULT_CONTENT_TYPE, Frame
from src.session.codec import Session

FRAME_PATH = "/v1/p1"
CHUNK_SIZE = 16 * 1024


class FrameClientError(Exception):
    """Raised when a frame request fails, times out or returns a non-2xx response."""


class FrameClient:
    """Thin wrapper around the bridge's frame endpoint using requests."""

    def __init__(self, base_url: str, timeout_seconds: float = 5.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    def fetch_frame(self, session: Session) -> Frame:
        """Fetch the device's latest frame; the whole exchange is bounded by the timeout."""
        url = f"{self._base_url}{FRAME_PATH}"
        params = {"auth": session.auth, "address": session.address, "pin": session.pin}
        deadline = time.monotonic() + self._timeout_seconds
        try:
            response = requests.post(url, params=params, timeout=self._timeout_seconds, stream=True)
        except requests.RequestException as exc:
            raise FrameClientError(f"Frame request failed: {exc}") from exc

        try:
            if not 200 <= response.status_code < 300:
                raise FrameClientError(f"Frame request failed: Status {response.status_code}")
            data = self._read_body(response, deadline)
            content_type = response.headers.get("Content-Type") or DEFAULT_CONTENT_TYPE
        finally:
            response.close()

        return Frame(data=data, content_type=content_type.split(";")[0].strip())

    def _read_body(self, response: requests.Response, deadline: float) -> bytes:
        # read1 returns whatever one receive yields, so a trickling body still
        # reaches the deadline check; a single stalled read is capped by the
        # read timeout.
        chunks: list[bytes] = []
        try:
            while True:
                if time.monotonic() > deadline:
                    raise FrameClientError(
                        f"Frame request timed out after {self._timeout_seconds:g}s"
                    )
                chunk = response.raw.read1(CHUNK_SIZE, decode_content=True)
                if not chunk:
                    break
                chunks.append(chunk)
        except (requests.RequestException, urllib3.exceptions.HTTPError, OSError) as exc:
            raise FrameClientError(f"Frame download failed: {exc}") from exc
        return b"".join(chunks)


__all__ = ["FRAME_PATH", "FrameClient", "FrameClientError"]
