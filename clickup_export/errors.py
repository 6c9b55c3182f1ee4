"""Exceptions raised by the ClickUp docs exporter.

The API client raises a single error type, ClickUpAPIError, tagged with an
ErrorKind so callers can react to authorization failures or missing
resources without inspecting the message text.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Category of a failed API call.

    RATE_LIMITED is never raised by ClickUpAPI, which retries 429 responses
    until they succeed. It exists so from_status covers every status the
    API documents.
    """

    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    SERVER_ERROR = "server_error"
    NOT_FOUND = "not_found"
    UNKNOWN = "unknown"

    @classmethod
    def from_status(cls, status_code: Optional[int]) -> "ErrorKind":
        """Map an HTTP status code (or None for transport failures) to a kind."""
        if status_code == 401:
            return cls.UNAUTHORIZED
        if status_code == 404:
            return cls.NOT_FOUND
        if status_code == 429:
            return cls.RATE_LIMITED
        if status_code is not None and status_code >= 500:
            return cls.SERVER_ERROR
        return cls.UNKNOWN


class ExporterError(Exception):
    """Base exception for all exporter errors."""
    pass


class ClickUpAPIError(ExporterError):
    """Raised when a ClickUp API request fails."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.UNKNOWN,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.status_code = status_code


class ConfigError(ExporterError):
    """Raised when a config file is missing or cannot be parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid config file {path}: {reason}")
        self.path = path
        self.reason = reason
