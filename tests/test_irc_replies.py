from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import ClassVar

import pytest

from ircd.irc.commands import MissingParameter, UnknownCommand
from ircd.irc.message import Message, parse_message
from ircd.irc.replies import (
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

CREATED = datetime(2020, 5, 17, 12, 30, tzinfo=UTC)


def test_welcome_line():
    line = Welcome(nick="nick", user="user", host="host").to_line()
    assert line == ":localhost 001 nick :Welcome to the network nick!user@host\r\n"


def test_welcome_message():
    msg = Welcome("nick", "user", "host").to_message()
    assert msg == Message(
        command="001",
        params=("nick", "Welcome to the network nick!user@host"),
        prefix="localhost",
    )


def test_unknown_command_line():
    assert UnknownCommandReply("FOO").to_line() == ":localhost 421 FOO :Unknown command\r\n"


def test_need_more_params_line():
    assert (
        NeedMoreParams("USER").to_line()
        == ":localhost 461 USER :Not enough parameters\r\n"
    )


def test_your_host_line():
    line = YourHost("nick", "irc.example.net", "ircd-0.1.0").to_line()
    assert line == (
        ":localhost 002 nick :Your host is irc.example.net, running version ircd-0.1.0\r\n"
    )


def test_created_line():
    line = Created("nick", CREATED).to_line()
    assert line == ":localhost 003 nick :This server was created 2020-05-17T12:30:00+00:00\r\n"


def test_my_info_line():
    line = MyInfo("nick", "irc.example.net", "v1", "iow", "ov").to_line()
    assert line == ":localhost 004 nick irc.example.net v1 iow :ov\r\n"


@pytest.mark.parametrize(
    ("code", "text"),
    [
        (ReplyCode.RPL_WELCOME, "001"),
        (ReplyCode.RPL_MYINFO, "004"),
        (ReplyCode.ERR_UNKNOWNCOMMAND, "421"),
        (ReplyCode.ERR_NEEDMOREPARAMS, "461"),
    ],
)
def test_reply_codes_render_three_digits(code, text):
    assert str(code) == text


def test_reply_for_unknown_command():
    reply = reply_for_error(UnknownCommand("FOO"))
    assert reply == UnknownCommandReply("FOO")
    assert reply.code is ReplyCode.ERR_UNKNOWNCOMMAND


def test_reply_for_missing_parameter():
    reply = reply_for_error(MissingParameter("USER", "mode", 1))
    assert reply == NeedMoreParams("USER")
    assert reply.code is ReplyCode.ERR_NEEDMOREPARAMS


def test_reply_for_error_rejects_other_values():
    with pytest.raises(TypeError):
        reply_for_error("FOO")  # type: ignore[arg-type]


def test_registration_burst_order():
    replies = registration_burst(
        "nick", "user", "host", servername="srv", version="v1", created_at=CREATED
    )
    assert [str(r.code) for r in replies] == ["001", "002", "003", "004"]
    assert replies[0] == Welcome("nick", "user", "host")


def test_rendered_replies_parse_back():
    line = Welcome("nick", "user", "host").to_line().removesuffix("\r\n")
    msg = parse_message(line)
    assert msg.prefix == "localhost"
    assert msg.params[-1] == "Welcome to the network nick!user@host"


def test_reply_without_params_cannot_be_instantiated():
    @dataclass(frozen=True)
    class Incomplete(Reply):
        code: ClassVar[ReplyCode] = ReplyCode.RPL_WELCOME

        nick: str

    with pytest.raises(TypeError):
        Incomplete("alice")


def test_reply_base_is_abstract():
    with pytest.raises(TypeError):
        Reply()
