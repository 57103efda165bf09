"""Recover a session from the location fragment, or capture one from the form."""

from __future__ import annotations

from dataclasses import dataclass

from src.session.codec import NoSessionFragment, Session, decode_session, encode_session

FRAGMENT_MARKER = "#"


@dataclass(frozen=True)
class CredentialInput:
    """Raw values read from the credential-entry form."""

    address: str
    pin: str
    auth: str


def recover_session(fragment_text: str) -> Session:
    """Return the session carried by a location fragment such as ``#eyJhZGRy...``.

    Raises NoSessionFragment when the marker is missing and MalformedSession
    (or one of its subclasses) when the token cannot be turned into a Session.
    """
    if not fragment_text.startswith(FRAGMENT_MARKER):
        raise NoSessionFragment("no session available")
    return decode_session(fragment_text[len(FRAGMENT_MARKER):])


def capture_session(form_input: CredentialInput) -> str:
    """Return the encoded token for the submitted credentials."""
    session = Session(address=form_input.address, pin=form_input.pin, auth=form_input.auth)
    return encode_session(session)


__all__ = ["FRAGMENT_MARKER", "CredentialInput", "capture_session", "recover_session"]
