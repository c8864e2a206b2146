from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    ARGUMENT = "argument"
    AUTHENTICATION = "authentication"
    READ = "read"
    PARSE = "parse"
    ROW_RESOLUTION = "row_resolution"
    SUBMISSION = "submission"
    SERVICE = "service"


class ScrobblerError(Exception):
    """Base error carrying its kind, a readable message and the raw payload (if any)."""

    kind: ErrorKind = ErrorKind.SERVICE

    def __init__(self, message: str, payload: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.payload = payload


class ArgumentError(ScrobblerError):
    kind = ErrorKind.ARGUMENT


class AuthenticationError(ScrobblerError):
    kind = ErrorKind.AUTHENTICATION


class ReadError(ScrobblerError):
    kind = ErrorKind.READ


class ParseError(ScrobblerError):
    kind = ErrorKind.PARSE


class RowResolutionError(ScrobblerError):
    kind = ErrorKind.ROW_RESOLUTION


class SubmissionError(ScrobblerError):
    kind = ErrorKind.SUBMISSION


class ServiceError(ScrobblerError):
    """Transport failure or an undecodable response from Last.fm."""

    kind = ErrorKind.SERVICE
