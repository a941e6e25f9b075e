"""Numeric reply catalog.

Every reply the server can emit is a small frozen value object that knows its
numeric code and the parameters it renders. Rendering goes through the
message grammar, so all replies share the same wire format::

    :localhost 001 nick :Welcome to the network nick!user@host

Adding a reply means adding a :class:`ReplyCode` member and a subclass of
:class:`Reply`.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from ..constants import SERVER_PREFIX, SUPPORTED_CHANNEL_MODES, SUPPORTED_USER_MODES
from .commands import MissingParameter, ParseError, UnknownCommand
from .message import Message, serialize_message


@enum.unique
class ReplyCode(enum.Enum):
    RPL_WELCOME = 1
    RPL_YOURHOST = 2
    RPL_CREATED = 3
    RPL_MYINFO = 4
    ERR_UNKNOWNCOMMAND = 421
    ERR_NEEDMOREPARAMS = 461

    def __str__(self) -> str:
        """Return the numeric in the wire protocol format, e.g. 001."""
        return str(self.value).zfill(3)


class Reply(ABC):
    """Base class for numeric replies."""

    code: ClassVar[ReplyCode]

    @abstractmethod
    def params(self) -> tuple[str, ...]:
        """Parameters after the numeric, the last one rendered as trailing."""

    def to_message(self) -> Message:
        return Message(command=str(self.code), params=self.params(), prefix=SERVER_PREFIX)

    def to_line(self) -> str:
        return serialize_message(self.to_message())


@dataclass(frozen=True)
class Welcome(Reply):
    code: ClassVar[ReplyCode] = ReplyCode.RPL_WELCOME

    nick: str
    user: str
    host: str

    def params(self) -> tuple[str, ...]:
        return (
            self.nick,
            f"Welcome to the network {self.nick}!{self.user}@{self.host}",
        )


@dataclass(frozen=True)
class YourHost(Reply):
    code: ClassVar[ReplyCode] = ReplyCode.RPL_YOURHOST

    nick: str
    servername: str
    version: str

    def params(self) -> tuple[str, ...]:
        return (
            self.nick,
            f"Your host is {self.servername}, running version {self.version}",
        )


@dataclass(frozen=True)
class Created(Reply):
    code: ClassVar[ReplyCode] = ReplyCode.RPL_CREATED

    nick: str
    created_at: datetime

    def params(self) -> tuple[str, ...]:
        return (self.nick, f"This server was created {self.created_at.isoformat()}")


@dataclass(frozen=True)
class MyInfo(Reply):
    code: ClassVar[ReplyCode] = ReplyCode.RPL_MYINFO

    nick: str
    servername: str
    version: str
    user_modes: str = SUPPORTED_USER_MODES
    channel_modes: str = SUPPORTED_CHANNEL_MODES

    def params(self) -> tuple[str, ...]:
        return (
            self.nick,
            self.servername,
            self.version,
            self.user_modes,
            self.channel_modes,
        )


@dataclass(frozen=True)
class UnknownCommandReply(Reply):
    code: ClassVar[ReplyCode] = ReplyCode.ERR_UNKNOWNCOMMAND

    command: str

    def params(self) -> tuple[str, ...]:
        return (self.command, "Unknown command")


@dataclass(frozen=True)
class NeedMoreParams(Reply):
    code: ClassVar[ReplyCode] = ReplyCode.ERR_NEEDMOREPARAMS

    command: str

    def params(self) -> tuple[str, ...]:
        return (self.command, "Not enough parameters")


def reply_for_error(error: ParseError) -> Reply:
    """Return the numeric reply for a command interpretation error."""
    if isinstance(error, UnknownCommand):
        return UnknownCommandReply(error.command)
    if isinstance(error, MissingParameter):
        return NeedMoreParams(error.command)
    raise TypeError(f"not a parse error: {error!r}")


def registration_burst(
    nick: str,
    user: str,
    host: str,
    *,
    servername: str,
    version: str,
    created_at: datetime,
) -> list[Reply]:
    """Replies sent once a client has completed USER (001 to 004)."""
    return [
        Welcome(nick, user, host),
        YourHost(nick, servername, version),
        Created(nick, created_at),
        MyInfo(nick, servername, version),
    ]


__all__ = [
    "Created",
    "MyInfo",
    "NeedMoreParams",
    "Reply",
    "ReplyCode",
    "UnknownCommandReply",
    "Welcome",
    "YourHost",
    "registration_burst",
    "reply_for_error",
]
