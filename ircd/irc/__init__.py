"""IRC subsystem package.

Contains the message grammar, the registration command interpreter, the
numeric reply catalog, and the per-connection session and listener that
drive them.
"""

from .commands import (  # noqa: F401
    Command,
    MissingParameter,
    Nick,
    ParseError,
    Pass,
    UnknownCommand,
    User,
    interpret,
)
from .message import (  # noqa: F401
    GrammarError,
    GrammarErrorKind,
    Message,
    parse_message,
    serialize_message,
)
from .replies import (  # noqa: F401
    Created,
    MyInfo,
    NeedMoreParams,
    Reply,
    ReplyCode,
    UnknownCommandReply,
    Welcome,
    YourHost,
    registration_burst,
    reply_for_error,
)
from .server import IRCServer  # noqa: F401
from .session import ClientSession  # noqa: F401

__all__ = [
    "ClientSession",
    "Command",
    "Created",
    "GrammarError",
    "GrammarErrorKind",
    "IRCServer",
    "Message",
    "MissingParameter",
    "MyInfo",
    "NeedMoreParams",
    "Nick",
    "ParseError",
    "Pass",
    "Reply",
    "ReplyCode",
    "UnknownCommand",
    "UnknownCommandReply",
    "User",
    "Welcome",
    "YourHost",
    "interpret",
    "parse_message",
    "registration_burst",
    "reply_for_error",
    "serialize_message",
]
