import pytest

from signalr_serverless.commands import HELP_TEXT, Quit, parse_command
from signalr_serverless.exceptions import (
    CommandError,
    UnrecognizedCommand,
    UnrecognizedSubcommand,
)
from signalr_serverless.messages import (
    AddToGroup,
    Broadcast,
    RemoveFromGroup,
    SendToGroup,
    SendToUser,
)


@pytest.mark.parametrize(
    "line,command",
    [
        ("broadcast", Broadcast()),
        ("send user bob", SendToUser("bob")),
        ("send group teamA", SendToGroup("teamA")),
        ("add teamA carol", AddToGroup("teamA", "carol")),
        ("ADD teamA carol", AddToGroup("teamA", "carol")),
        ("remove teamA carol", RemoveFromGroup("teamA", "carol")),
        ("Remove teamA carol", RemoveFromGroup("teamA", "carol")),
        ("Q", Quit()),
        ("Quite", Quit()),
        ("  send   user  bob ", SendToUser("bob")),
    ],
)
def test_parse_command(line, command):
    assert parse_command(line) == command


@pytest.mark.parametrize("line", ["", "   ", "\t"])
def test_blank_line(line):
    assert parse_command(line) is None


@pytest.mark.parametrize(
    "line",
    [
        "frobnicate",
        "broadcast now",
        "send user",
        "send user bob extra",
        "add teamA",
        "remove",
        "Broadcast",
        "q",
        "quit",
    ],
)
def test_unrecognized_command(line):
    with pytest.raises(UnrecognizedCommand):
        parse_command(line)


def test_unrecognized_subcommand():
    with pytest.raises(UnrecognizedSubcommand) as exc_info:
        parse_command("send channel bob")
    assert str(exc_info.value) == "channel"
    assert isinstance(exc_info.value, CommandError)


def test_help_text_lists_commands():
    for usage in ("send user", "send group", "broadcast", "add", "remove", "Q | Quite"):
        assert usage in HELP_TEXT
