"""Environment-driven settings for the CLI and the API server."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from typing import Mapping

from humanlogic.error_msg import fail

HOST_ENV = "HUMANLOGIC_HOST"
PORT_ENV = "HUMANLOGIC_PORT"
LOG_LEVEL_ENV = "HUMANLOGIC_LOG_LEVEL"
CORS_ORIGINS_ENV = "HUMANLOGIC_CORS_ORIGINS"

_DEFAULT_HOST = "127.0.0.1"
_DEFAULT_PORT = 8000
_DEFAULT_LOG_LEVEL = "INFO"
_LOG_LEVELS = {"DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings; CLI options take precedence over these."""

    host: str = _DEFAULT_HOST
    port: int = _DEFAULT_PORT
    log_level: str = _DEFAULT_LOG_LEVEL
    cors_origins: tuple[str, ...] = ("*",)


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        port = -1
    if not 0 < port < 65536:
        fail(f"{PORT_ENV} must be a TCP port number, got '{raw}'")
    return port


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if level not in _LOG_LEVELS:
        fail(f"{LOG_LEVEL_ENV} must be one of {', '.join(sorted(_LOG_LEVELS))}, got '{raw}'")
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from the environment (or the given mapping)."""
    env = os.environ if environ is None else environ
    settings = Settings(
        host=env.get(HOST_ENV, "").strip() or _DEFAULT_HOST,
        port=_parse_port(env[PORT_ENV]) if env.get(PORT_ENV) else _DEFAULT_PORT,
        log_level=_parse_log_level(env[LOG_LEVEL_ENV]) if env.get(LOG_LEVEL_ENV) else _DEFAULT_LOG_LEVEL,
        cors_origins=tuple(
            origin.strip()
            for origin in env.get(CORS_ORIGINS_ENV, "*").split(",")
            if origin.strip()
        ) or ("*",),
    )
    logging.getLogger(__name__).debug("Loaded settings: %s", settings)
    return settings
