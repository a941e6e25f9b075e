from __future__ import annotations

import pytest

from ircd.irc.message import (
    GrammarError,
    GrammarErrorKind,
    Message,
    parse_message,
    serialize_message,
)


def test_parse_command_only():
    assert parse_message("LIST") == Message(command="LIST", params=(), prefix=None)


def test_parse_prefix_without_params():
    msg = parse_message(":irc.example.net LIST")
    assert msg == Message(command="LIST", params=(), prefix="irc.example.net")


def test_parse_trailing_parameter_keeps_spaces():
    msg = parse_message("PRIVMSG Cardinal :this is a test")
    assert msg == Message(command="PRIVMSG", params=("Cardinal", "this is a test"))


def test_parse_trailing_only():
    msg = parse_message("PONG :irc.example.net")
    assert msg == Message(command="PONG", params=("irc.example.net",))


def test_parse_positional_parameters_without_trailer():
    msg = parse_message("MODE #test +v Cardinal")
    assert isinstance(msg, Message)
    assert msg.params == ("#test", "+v", "Cardinal")


def test_parse_prefix_and_trailing():
    msg = parse_message(":alice!auser@ahost PRIVMSG #test :Hello world")
    assert msg.prefix == "alice!auser@ahost"
    assert msg.command == "PRIVMSG"
    assert msg.params == ("#test", "Hello world")


def test_parse_consecutive_spaces_yield_empty_parameters():
    msg = parse_message("MODE a  b")
    assert msg.params == ("a", "", "b")


def test_parse_trailing_is_not_reparsed():
    msg = parse_message("KICK #chan target :reason :with colon")
    assert msg.params == ("#chan", "target", "reason :with colon")


def test_parse_colon_inside_middle_param_is_literal():
    msg = parse_message("NICK a:b")
    assert msg.params == ("a:b",)


def test_parse_empty_trailing_parameter():
    msg = parse_message("USER guest 0 * :")
    assert msg.params == ("guest", "0", "*", "")


def test_parse_trailing_space_after_command_yields_no_params():
    msg = parse_message("LIST ")
    assert msg.command == "LIST"
    assert msg.params == ()


def test_parse_empty_region_before_trailing_is_one_empty_parameter():
    msg = parse_message("CMD  :x")
    assert msg.params == ("", "x")


def test_parse_trailing_marker_on_command_space_has_no_positional_params():
    assert parse_message("CMD :x").params == ("x",)


def test_parse_empty_parameter_before_trailing_after_positional():
    assert parse_message("CMD a  :x").params == ("a", "", "x")


def test_parse_command_case_preserved():
    assert parse_message("nick foo").command == "nick"


@pytest.mark.parametrize(
    ("line", "kind"),
    [
        ("", GrammarErrorKind.EMPTY_MESSAGE),
        (":", GrammarErrorKind.PREFIX_WITHOUT_COMMAND),
        (":irc.example.net", GrammarErrorKind.PREFIX_WITHOUT_COMMAND),
        (": foo", GrammarErrorKind.EMPTY_PREFIX),
        (" LIST", GrammarErrorKind.MISSING_COMMAND),
        (":irc.example.net ", GrammarErrorKind.MISSING_COMMAND),
        (":irc.example.net  LIST", GrammarErrorKind.MISSING_COMMAND),
    ],
)
def test_parse_rejects_malformed_lines(line, kind):
    result = parse_message(line)
    assert isinstance(result, GrammarError)
    assert result.kind is kind
    assert result.line == line
    assert str(result) == kind.value


def test_serialize_always_colons_last_parameter():
    msg = Message(command="NICK", params=("guest",))
    assert serialize_message(msg) == "NICK :guest\r\n"


def test_serialize_with_prefix_and_params():
    msg = Message(command="001", params=("nick", "Welcome home"), prefix="localhost")
    assert serialize_message(msg) == ":localhost 001 nick :Welcome home\r\n"


def test_serialize_without_params_has_no_colon_segment():
    assert serialize_message(Message(command="PING")) == "PING\r\n"
    assert Message(command="LIST", prefix="srv").to_line() == ":srv LIST\r\n"


def test_str_omits_crlf():
    assert str(Message(command="PONG", params=("x",))) == "PONG :x"


@pytest.mark.parametrize(
    "msg",
    [
        Message(command="PRIVMSG", params=("Cardinal", "this is a test")),
        Message(command="PONG", params=("irc.example.net",), prefix="srv"),
        Message(command="USER", params=("guest", "0", "*", "Real Name")),
        Message(command="TOPIC", params=("#chan", "")),
        Message(command="CMD", params=("", "x")),
        Message(command="CMD", params=("a", "", "")),
    ],
)
def test_parse_recovers_serialized_message(msg):
    line = serialize_message(msg).removesuffix("\r\n")
    assert parse_message(line) == msg


def test_serialize_of_parse_may_add_colon():
    line = "MODE #test +v Cardinal"
    assert serialize_message(parse_message(line)) == "MODE #test +v :Cardinal\r\n"


def test_message_is_immutable():
    msg = Message(command="LIST")
    with pytest.raises(AttributeError):
        msg.command = "NAMES"  # type: ignore[misc]
