"""Registration command interpreter.

Turns a parsed :class:`~ircd.irc.message.Message` into one of the typed
commands the server understands (PASS, NICK, USER), or into a typed
parse error. Both outcomes are plain return values; unknown commands and
missing parameters are ordinary client mistakes, not exceptional conditions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .message import Message


@dataclass(frozen=True, slots=True)
class Pass:
    NAME: ClassVar[str] = "PASS"
    PARAMETERS: ClassVar[tuple[str, ...]] = ("password",)

    password: str


@dataclass(frozen=True, slots=True)
class Nick:
    NAME: ClassVar[str] = "NICK"
    PARAMETERS: ClassVar[tuple[str, ...]] = ("nick",)

    nickname: str


@dataclass(frozen=True, slots=True)
class User:
    NAME: ClassVar[str] = "USER"
    PARAMETERS: ClassVar[tuple[str, ...]] = ("user", "mode", "unused", "realname")

    username: str
    mode: str
    unused: str
    realname: str


Command = Pass | Nick | User

# Closed set of recognized commands, keyed by wire name
COMMANDS: dict[str, type[Pass] | type[Nick] | type[User]] = {
    cls.NAME: cls for cls in (Pass, Nick, User)
}


@dataclass(frozen=True, slots=True)
class UnknownCommand:
    """The message's command is not one the server recognizes."""

    command: str


@dataclass(frozen=True, slots=True)
class MissingParameter:
    """A recognized command lacks a required positional parameter.

    ``index`` is the 0-based position of the first absent parameter and
    ``parameter`` its name.
    """

    command: str
    parameter: str
    index: int


ParseError = UnknownCommand | MissingParameter


def interpret(message: Message) -> Command | ParseError:
    """Map ``message`` to a typed command.

    Matching on the command name is exact and case-sensitive. Required
    parameters are checked in order and the first missing one is reported;
    there is no partial success.
    """
    command_cls = COMMANDS.get(message.command)
    if command_cls is None:
        return UnknownCommand(message.command)

    names = command_cls.PARAMETERS
    if len(message.params) < len(names):
        index = len(message.params)
        return MissingParameter(command_cls.NAME, names[index], index)
    return command_cls(*message.params[: len(names)])


__all__ = [
    "COMMANDS",
    "Command",
    "MissingParameter",
    "Nick",
    "ParseError",
    "Pass",
    "UnknownCommand",
    "User",
    "interpret",
]
