"""Session capture and recovery for the frame viewer."""

from src.session.codec import (
    MalformedSession,
    MissingSessionField,
    NoSessionFragment,
    Session,
    SessionDecodeError,
    SessionError,
    decode_session,
    encode_session,
)
from src.session.manager import CredentialInput, capture_session, recover_session

__all__ = [
    "CredentialInput",
    "MalformedSession",
    "MissingSessionField",
    "NoSessionFragment",
    "Session",
    "SessionDecodeError",
    "SessionError",
    "capture_session",
    "decode_session",
    "encode_session",
    "recover_session",
]
