from __future__ import annotations

import logging
import os
from argparse import Namespace
from dataclasses import dataclass, field

from .errors import ArgumentError

# Flag name -> environment fallback.
REQUIRED_OPTIONS = {
    "api-key": "LASTFM_API_KEY",
    "api-secret": "LASTFM_API_SECRET",
    "username": "LASTFM_USERNAME",
    "password": "LASTFM_PASSWORD",
}

LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _str_to_float(val: str | None, default: float | None) -> float | None:
    try:
        return float(val) if val else default
    except ValueError:
        return default


def _resolve(value: str | None, env_name: str) -> str:
    if value:
        return value
    return os.getenv(env_name, "").strip()


@dataclass(frozen=True)
class Settings:
    """Resolved run options, built once at startup and only ever read afterwards."""

    api_key: str
    api_secret: str = field(repr=False)
    username: str
    password: str = field(repr=False)
    delimiter: str = ","
    header: bool = False
    debug: bool = False
    input_path: str | None = None
    log_level: str = "INFO"
    request_timeout: float | None = None
    scrobble_interval: int = 30
    success_delay: float = 0.2

    @staticmethod
    def from_args(args: Namespace) -> "Settings":
        """Build settings from parsed CLI arguments, falling back to the environment for credentials."""
        values: dict[str, str] = {}
        for option, env_name in REQUIRED_OPTIONS.items():
            value = _resolve(getattr(args, option.replace("-", "_"), None), env_name)
            if not value:
                raise ArgumentError(f"{option} is required")
            values[option.replace("-", "_")] = value

        delimiter = args.delimiter if args.delimiter is not None else ","
        if len(delimiter) != 1:
            raise ArgumentError(f"delimiter must be a single character, got {delimiter!r}")

        debug = bool(args.debug)
        log_level = "DEBUG" if debug else os.getenv("LOG_LEVEL", "INFO").upper()
        if log_level not in LOG_LEVELS:
            log_level = "INFO"

        return Settings(
            **values,
            delimiter=delimiter,
            header=bool(args.header),
            debug=debug,
            input_path=getattr(args, "csv_file", None),
            log_level=log_level,
            request_timeout=_str_to_float(os.getenv("LASTFM_TIMEOUT"), None),
        )


def configure_logging(level: str) -> None:
    """Configure logging with the specified level."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(levelname)s: %(message)s",
    )
