"""Session model and its URL-fragment-safe token encoding."""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass
import json
from typing import Any


class SessionError(Exception):
    """Raised when no usable session can be derived."""


class NoSessionFragment(SessionError):
    """Raised when the location fragment does not carry a session."""


class MalformedSession(SessionError):
    """Raised when a session token is present but unusable."""


class SessionDecodeError(MalformedSession):
    """Raised when a token is not base64-encoded JSON describing an object."""


class MissingSessionField(MalformedSession):
    """Raised when a decoded session lacks a mandatory field."""

    def __init__(self, field: str) -> None:
        super().__init__(f"no session {field}")
        self.field = field


@dataclass(frozen=True)
class Session:
    """Device address, PIN and API auth token for one viewer session."""

    address: str
    pin: str
    auth: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"address": self.address, "pin": self.pin, "auth": self.auth}


def encode_session(session: Session) -> str:
    """Encode a session as base64(JSON), matching the browser client's tokens."""
    payload = json.dumps(session.to_dict(), separators=(",", ":"))
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def _field(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise SessionDecodeError(f"Session field '{key}' must be a string")
    return value


def decode_session(token: str) -> Session:
    """Decode a token produced by encode_session back into a Session."""
    try:
        raw = base64.b64decode(token, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise SessionDecodeError(f"Session token is not valid base64: {exc}") from exc

    try:
        data = json.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as exc:
        raise SessionDecodeError("Session token is not valid UTF-8") from exc
    except json.JSONDecodeError as exc:
        raise SessionDecodeError(f"Session token is not valid JSON: {exc}") from exc
    except RecursionError as exc:
        raise SessionDecodeError("Session token JSON is nested too deeply") from exc

    if not isinstance(data, dict):
        raise SessionDecodeError("Session token must describe a JSON object")

    address = _field(data, "address")
    if address is None:
        raise MissingSessionField("address")
    pin = _field(data, "pin")
    if pin is None:
        raise MissingSessionField("pin")
    auth = _field(data, "auth")

    return Session(address=address, pin=pin, auth=auth or "")


__all__ = [
    "MalformedSession",
    "MissingSessionField",
    "NoSessionFragment",
    "Session",
    "SessionDecodeError",
    "SessionError",
    "decode_session",
    "encode_session",
]
