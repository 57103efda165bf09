"""Terminal rendition of the credential-entry form."""

from __future__ import annotations

from getpass import getpass
from typing import Callable

from src.session.manager import CredentialInput

Prompt = Callable[[str], str]


class CredentialForm:
    """Collects device address, PIN and auth token from the user."""

    def __init__(
        self,
        default_auth: str = "",
        prompt: Prompt = input,
        secret_prompt: Prompt = getpass,
    ) -> None:
        self._default_auth = default_auth
        self._prompt = prompt
        self._secret_prompt = secret_prompt

    def read(self) -> CredentialInput:
        """Read the three fields; values are taken as typed, without validation."""
        address = self._prompt("Device address: ")
        pin = self._secret_prompt("Device PIN: ")
        if self._default_auth:
            auth = self._secret_prompt("API auth token (leave blank to use the configured token): ")
            auth = auth or self._default_auth
        else:
            auth = self._secret_prompt("API auth token: ")
        return CredentialInput(address=address, pin=pin, auth=auth)


__all__ = ["CredentialForm", "Prompt"]
