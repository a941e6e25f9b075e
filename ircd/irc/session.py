"""Per-connection line handling.

A session feeds each inbound line through the grammar and the command
interpreter and returns the reply lines to write back. It only remembers
the nickname and username a client announced, so that the welcome burst
can address it; there is no registration state machine.
"""

from __future__ import annotations

import logging

from ..config.model import IrcSettings
from ..logs.logger import logger
from .commands import (
    Command,
    MissingParameter,
    Nick,
    ParseError,
    Pass,
    UnknownCommand,
    User,
    interpret,
)
from .message import CRLF, GrammarError, parse_message
from .replies import Reply, registration_burst, reply_for_error

UNREGISTERED_NICK = "*"


class ClientSession:
    """Line handler for a single client connection."""

    def __init__(self, host: str, settings: IrcSettings | None = None) -> None:
        self.host = host
        self.settings = settings or IrcSettings()
        self.nickname: str | None = None
        self.username: str | None = None

    def handle_line(self, line: str) -> list[str]:
        """Process one inbound line and return the wire lines to send back."""
        line = line.removesuffix("\n").removesuffix("\r")
        if not line.strip():
            return []

        logger.log_event("irc", "line_in", level=logging.DEBUG, client=self.host, line=line)
        parsed = parse_message(line)
        if isinstance(parsed, GrammarError):
            logger.log_event(
                "irc",
                "grammar_error",
                level=logging.DEBUG,
                client=self.host,
                reason=parsed.message,
            )
            return []

        lines = [reply.to_line() for reply in self._dispatch(interpret(parsed))]
        for out in lines:
            logger.log_event(
                "irc",
                "line_out",
                level=logging.DEBUG,
                client=self.host,
                line=out.removesuffix(CRLF),
            )
        return lines

    def _dispatch(self, result: Command | ParseError) -> list[Reply]:
        if isinstance(result, UnknownCommand):
            logger.log_event(
                "irc", "unknown_command", client=self.host, command=result.command
            )
            return [reply_for_error(result)]
        if isinstance(result, MissingParameter):
            logger.log_event(
                "irc",
                "missing_parameter",
                client=self.host,
                command=result.command,
                parameter=result.parameter,
                index=result.index,
            )
            return [reply_for_error(result)]
        if isinstance(result, Pass):
            logger.log_event("irc", "pass", level=logging.DEBUG, client=self.host)
            return []
        if isinstance(result, Nick):
            self.nickname = result.nickname
            logger.log_event("irc", "nick", client=self.host, nick=result.nickname)
            return []
        if isinstance(result, User):
            self.username = result.username
            return self._welcome()
        raise TypeError(f"unexpected interpreter result: {result!r}")

    def _welcome(self) -> list[Reply]:
        nick = self.nickname or UNREGISTERED_NICK
        user = self.username or UNREGISTERED_NICK
        logger.log_event(
            "irc", "registered", client=self.host, nick=nick, user=user, host=self.host
        )
        return registration_burst(
            nick,
            user,
            self.host,
            servername=self.settings.hostname,
            version=self.settings.version,
            created_at=self.settings.created_at,
        )
