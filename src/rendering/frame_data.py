"""Data structures for rendering frames."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CONTENT_TYPE = "image/jpeg"


@dataclass(frozen=True)
class Frame:
    """One opaque image payload as fetched from the device."""

    data: bytes
    content_type: str = DEFAULT_CONTENT_TYPE


__all__ = ["DEFAULT_CONTENT_TYPE", "Frame"]
