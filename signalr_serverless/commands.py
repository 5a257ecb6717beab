from dataclasses import dataclass
from typing import Optional, Union

from .exceptions import UnrecognizedCommand, UnrecognizedSubcommand
from .messages import (
    AddToGroup,
    Broadcast,
    OperationKind,
    RemoveFromGroup,
    SendToGroup,
    SendToUser,
)

QUIT_KEYWORDS = ("Q", "Quite")

HELP_TEXT = (
    "*********Usage*********\n"
    "send user <User Id>\n"
    "send group <Group Name>\n"
    "broadcast\n"
    "add <Group Name> <User Id>\n"
    "remove <Group Name> <User Id>\n"
    "Q | Quite\n"
    "***********************"
)


@dataclass(frozen=True)
class Quit:
    pass


Command = Union[OperationKind, Quit]


def parse_command(line: str) -> Optional[Command]:
    """Translate one input line into an operation.

    Returns ``None`` for blank lines. Raises ``UnrecognizedCommand`` when the
    line has no known shape and ``UnrecognizedSubcommand`` when ``send`` is
    followed by something other than ``user`` or ``group``.
    """
    stripped = line.strip()
    if not stripped:
        return None
    if stripped in QUIT_KEYWORDS:
        return Quit()
    args = stripped.split()
    verb = args[0]
    if len(args) == 1 and verb == "broadcast":
        return Broadcast()
    if len(args) == 3:
        if verb == "send":
            if args[1] == "user":
                return SendToUser(args[2])
            elif args[1] == "group":
                return SendToGroup(args[2])
            raise UnrecognizedSubcommand(args[1])
        elif verb.lower() == "add":
            return AddToGroup(args[1], args[2])
        elif verb.lower() == "remove":
            return RemoveFromGroup(args[1], args[2])
    raise UnrecognizedCommand(line)
