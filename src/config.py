"""Configuration loader for the P1 frame viewer."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Any

from dotenv import load_dotenv
import yaml


@dataclass(frozen=True)
class ViewerConfig:
    """Camera bridge connection and polling configuration."""

    base_url: str
    frame_interval_ms: int
    loading_timeout_ms: int
    default_auth: str

    @property
    def frame_interval_seconds(self) -> float:
        return self.frame_interval_ms / 1000.0

    @property
    def loading_timeout_seconds(self) -> float:
        return self.loading_timeout_ms / 1000.0


@dataclass(frozen=True)
class DisplayConfig:
    """Frame output configuration."""

    output_path: str
    preview_host: str
    preview_port: int
    placeholder_width: int
    placeholder_height: int


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str
    log_dir: str


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration."""

    viewer: ViewerConfig
    display: DisplayConfig
    log: LoggingConfig


def _require_key(mapping: dict[str, Any], key: str, context: str) -> Any:
    if key not in mapping:
        raise ValueError(f"Missing required key '{key}' in {context} config")
    return mapping[key]


def _require_positive(mapping: dict[str, Any], key: str, context: str) -> int:
    value = _require_key(mapping, key, context)
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise ValueError(f"'{key}' in {context} config must be a positive integer")
    return value


def load_config(path: str = "config/config.yaml") -> AppConfig:
    """Load application configuration from a YAML file."""
    load_dotenv()
    default_auth = os.environ.get("P1VIEW_AUTH", "")
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {path}") from exc

    if not isinstance(data, dict):
        raise ValueError("Config file must contain a mapping at the top level")

    viewer_section = _require_key(data, "viewer", "viewer")
    display_section = _require_key(data, "display", "display")
    logging_section = _require_key(data, "logging", "logging")

    if not isinstance(viewer_section, dict):
        raise ValueError("'viewer' config must be a mapping")
    if not isinstance(display_section, dict):
        raise ValueError("'display' config must be a mapping")
    if not isinstance(logging_section, dict):
        raise ValueError("'logging' config must be a mapping")

    viewer = ViewerConfig(
        base_url=_require_key(viewer_section, "base_url", "viewer"),
        frame_interval_ms=_require_positive(viewer_section, "frame_interval_ms", "viewer"),
        loading_timeout_ms=_require_positive(viewer_section, "loading_timeout_ms", "viewer"),
        default_auth=default_auth,
    )

    display = DisplayConfig(
        output_path=_require_key(display_section, "output_path", "display"),
        preview_host=display_section.get("preview_host", "127.0.0.1"),
        preview_port=_require_key(display_section, "preview_port", "display"),
        placeholder_width=_require_positive(display_section, "placeholder_width", "display"),
        placeholder_height=_require_positive(display_section, "placeholder_height", "display"),
    )

    logging = LoggingConfig(
        level=_require_key(logging_section, "level", "logging"),
        log_dir=_require_key(logging_section, "log_dir", "logging"),
    )

    return AppConfig(viewer=viewer, display=display, log=logging)
