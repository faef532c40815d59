"""Application settings read from the environment."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError

ENV_PREFIX = 'JSON_SCHEMA_FORM_'


@dataclass(frozen=True)
class AppSettings:
    """Launch options for the Gradio app."""

    server_name: str = '127.0.0.1'
    server_port: int = 7860
    log_level: str = 'INFO'


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError as exc:
        raise ConfigurationError(f"{ENV_PREFIX}SERVER_PORT must be an integer, got {value!r}") from exc
    if not 0 < port < 65536:
        raise ConfigurationError(f"{ENV_PREFIX}SERVER_PORT out of range: {port}")
    return port


def _log_level(value: str) -> str:
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"Unknown {ENV_PREFIX}LOG_LEVEL: {value!r}")
    return level


def load_settings(environ: Optional[Mapping[str, str]] = None) -> AppSettings:
    environ = os.environ if environ is None else environ
    defaults = AppSettings()

    server_name = environ.get(f'{ENV_PREFIX}SERVER_NAME') or defaults.server_name
    port_text = environ.get(f'{ENV_PREFIX}SERVER_PORT')
    level_text = environ.get(f'{ENV_PREFIX}LOG_LEVEL')

    return AppSettings(
        server_name=server_name,
        server_port=_port(port_text) if port_text else defaults.server_port,
        log_level=_log_level(level_text) if level_text else defaults.log_level,
    )
