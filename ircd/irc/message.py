"""IRC message grammar: parse wire lines into messages and serialize them back.

An IRC message has the general form::

    [:prefix ] command [params ...] [ :trailing]

Where:
    - prefix   is optional, starts with ':' and ends at the first space
    - command  is a word (PRIVMSG, NICK …) or a three-digit numeric
    - params   are separated by single spaces; consecutive spaces yield
               empty parameters
    - trailing is the final parameter, introduced by ' :', and may contain
               spaces

Parsing and serialization are intentionally asymmetric. On input the trailing
marker is optional when the last parameter has no spaces. On output the last
parameter always carries the colon, so ``parse_message`` recovers the same
parameters from a serialized message even though serializing a parsed line
may not reproduce it byte for byte.

Malformed lines are routine client input, so ``parse_message`` returns a
:class:`GrammarError` value instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

CRLF = "\r\n"


class GrammarErrorKind(Enum):
    EMPTY_MESSAGE = "IRC message may not be empty"
    PREFIX_WITHOUT_COMMAND = "Found prefix indication, but no command"
    EMPTY_PREFIX = "Found prefix indication, but no prefix"
    MISSING_COMMAND = "Missing required command"


@dataclass(frozen=True, slots=True)
class GrammarError:
    """A line that does not match the message grammar."""

    kind: GrammarErrorKind
    line: str

    @property
    def message(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True, slots=True)
class Message:
    """A single IRC protocol message."""

    command: str
    params: tuple[str, ...] = field(default_factory=tuple)
    prefix: str | None = None

    def to_line(self) -> str:
        return serialize_message(self)

    def __str__(self) -> str:
        return self.to_line().removesuffix(CRLF)


def parse_message(line: str) -> Message | GrammarError:
    """Parse a raw IRC line into a :class:`Message`.

    Parameters
    ----------
    line : str
        A single IRC protocol line **without** the trailing ``\\r\\n``.

    Returns
    -------
    Message | GrammarError
        The parsed message, or the reason the line was rejected.
    """
    if not line:
        return GrammarError(GrammarErrorKind.EMPTY_MESSAGE, line)

    prefix: str | None = None
    cursor = 0

    if line[0] == ":":
        space = line.find(" ", 1)
        if space == -1:
            return GrammarError(GrammarErrorKind.PREFIX_WITHOUT_COMMAND, line)
        if space == 1:
            return GrammarError(GrammarErrorKind.EMPTY_PREFIX, line)
        prefix = line[1:space]
        cursor = space + 1

    command_end = line.find(" ", cursor)
    if command_end == -1:
        command_end = len(line)
    command = line[cursor:command_end]
    if not command:
        return GrammarError(GrammarErrorKind.MISSING_COMMAND, line)

    # Keep the space after the command: the trailing marker is ' :'
    rest = line[command_end:]
    marker = rest.find(" :")
    if marker == -1:
        middle = rest[1:]
        params = middle.split(" ") if middle else []
    else:
        # Anything between the command's space and the marker is split,
        # even when it is empty: "CMD  :x" carries ("", "x")
        params = rest[1:marker].split(" ") if marker > 0 else []
        params.append(rest[marker + 2:])

    return Message(command=command, params=tuple(params), prefix=prefix)


def serialize_message(message: Message) -> str:
    """Render ``message`` as a CRLF-terminated wire line.

    The last parameter is always written with a leading colon.
    """
    parts: list[str] = []
    if message.prefix is not None:
        parts.append(f":{message.prefix}")
    parts.append(message.command)
    if message.params:
        parts.extend(message.params[:-1])
        parts.append(f":{message.params[-1]}")
    return " ".join(parts) + CRLF


__all__ = [
    "CRLF",
    "GrammarError",
    "GrammarErrorKind",
    "Message",
    "parse_message",
    "serialize_message",
]
