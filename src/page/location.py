"""Mutable page location whose fragment carries the session."""

from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

DEFAULT_PAGE_URL = "http://localhost/site/p1.html"


class Location:
    """A URL with a browser-style ``hash`` accessor."""

    def __init__(self, href: str = DEFAULT_PAGE_URL) -> None:
        self._parts = urlsplit(href)

    @property
    def href(self) -> str:
        return urlunsplit(self._parts)

    @property
    def hash(self) -> str:
        """The fragment including its leading ``#``, or ``""`` when there is none."""
        return f"#{self._parts.fragment}" if self._parts.fragment else ""

    @hash.setter
    def hash(self, value: str) -> None:
        self._parts = self._parts._replace(fragment=value[1:] if value.startswith("#") else value)

    def __repr__(self) -> str:
        return f"Location({self.href!r})"


__all__ = ["DEFAULT_PAGE_URL", "Location"]
