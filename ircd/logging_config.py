"""
Console logging for the ircd server.

``LoggerConfigurator`` installs a single colorlog handler on the root logger.
Errors that reach ``log_structured_error`` are counted in ``error_tally`` by
category and by client, and the counts are logged once when the process exits.
"""

from __future__ import annotations

import atexit
import logging
import os
import sys
from collections import Counter
from typing import Any

import colorlog

LOG_FORMAT = "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "magenta",
}

_log = logging.getLogger("ircd")


class ErrorTally:
    """Error counts for one server process.

    Categories come from ``ircd.errors.classify_error``; the client key is the
    ``client`` entry of the error context, i.e. the ``host:port`` peer label.
    """

    def __init__(self) -> None:
        self.by_category: Counter[str] = Counter()
        self.by_client: Counter[str] = Counter()
        self.last_message: dict[str, str] = {}

    @property
    def total(self) -> int:
        return sum(self.by_category.values())

    def record(self, category: str, message: str, client: str | None = None) -> None:
        self.by_category[category] += 1
        self.last_message[category] = message
        if client:
            self.by_client[client] += 1

    def clear(self) -> None:
        self.by_category.clear()
        self.by_client.clear()
        self.last_message.clear()

    def log_report(self, top_clients: int = 3) -> None:
        """Log the counts gathered so far, or a single line when there are none."""
        if not self.total:
            _log.info("No errors recorded this session")
            return

        counts = ", ".join(f"{c}={n}" for c, n in self.by_category.most_common())
        _log.warning(f"{self.total} error(s) this session: {counts}")
        for category, message in self.last_message.items():
            _log.warning(f"  last {category}: {message}")
        if self.by_client:
            clients = ", ".join(f"{c} ({n})" for c, n in self.by_client.most_common(top_clients))
            _log.warning(f"  clients with most errors: {clients}")


error_tally = ErrorTally()


def log_structured_error(
    error_type: str,
    message: str,
    exception: BaseException | None = None,
    context: dict[str, Any] | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log one line of the form ``[TYPE] message | Exception: ... | Context: k=v``.

    The error is also counted in :data:`error_tally`.
    """
    parts = [f"[{error_type.upper()}] {message}"]
    if exception is not None:
        parts.append(f"Exception: {type(exception).__name__}: {exception}")
    if context:
        parts.append("Context: " + " | ".join(f"{k}={v}" for k, v in context.items()))
    _log.log(level, " | ".join(parts))

    client = (context or {}).get("client")
    error_tally.record(error_type, message, str(client) if client else None)


class ConsoleHandler(logging.StreamHandler):
    """The stderr handler owned by :class:`LoggerConfigurator`."""


class LoggerConfigurator:
    """Root logger setup with colored console output.

    The level comes from ``config["level"]`` when given, else from the
    ``DEBUG`` environment variable (``true``, ``1`` or ``yes`` selects DEBUG).
    """

    def __init__(self, config: dict[str, Any] | None = None):
        self.config = config or {}

    def resolve_level(self) -> int:
        if "level" in self.config:
            return self.config["level"]
        debug_env = os.environ.get("DEBUG", "").lower()
        return logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO

    def build_formatter(self) -> colorlog.ColoredFormatter:
        return colorlog.ColoredFormatter(
            LOG_FORMAT,
            datefmt=LOG_DATEFMT,
            log_colors=LEVEL_COLORS,
            secondary_log_colors={"message": {"ERROR": "red", "CRITICAL": "magenta"}},
            reset=True,
        )

    def configure(self) -> None:
        """Install the console handler, replacing one from an earlier call."""
        handler = ConsoleHandler(sys.stderr)
        handler.setFormatter(self.build_formatter())

        root_logger = logging.getLogger()
        for existing in list(root_logger.handlers):
            if isinstance(existing, ConsoleHandler):
                root_logger.removeHandler(existing)
        root_logger.addHandler(handler)
        root_logger.setLevel(self.resolve_level())

        # Per-connection stream chatter from asyncio is not useful at INFO
        logging.getLogger("asyncio").setLevel(logging.WARNING)

        atexit.register(error_tally.log_report)
