"""Centralized internal error hierarchy.

These exceptions cover the I/O and configuration boundary of the server.
Malformed client input never raises: the grammar and the command interpreter
return error values instead, and the session maps them to numeric replies.

Classes:
  InternalError        – Base for all internal errors.
  NetworkError         – Transport issues on a client connection or the listener.
  ConfigError          – Configuration file missing, unreadable or invalid.
"""

from __future__ import annotations

from collections.abc import Mapping


class InternalError(Exception):
    """Base class for all internal application errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.

    Args:
        message: Descriptive error message.
        data: Optional mapping of additional context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class NetworkError(InternalError):
    """Exception raised for network or transport layer errors.

    This includes failures to bind the listening socket as well as resets
    or timeouts on an individual client connection.
    """


class ConfigError(InternalError):
    """Exception raised when the configuration file cannot be used.

    Covers a missing or unreadable file, invalid TOML, and values rejected
    by the configuration model.
    """


__all__ = [
    "InternalError",
    "NetworkError",
    "ConfigError",
]
