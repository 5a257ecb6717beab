from dataclasses import dataclass
from typing import Any, List, Union

from .exceptions import ServiceRejected


@dataclass
class PayloadMessage:
    target: str
    arguments: List[Any]


@dataclass(frozen=True)
class Broadcast:
    pass


@dataclass(frozen=True)
class SendToUser:
    user_id: str


@dataclass(frozen=True)
class SendToGroup:
    group_name: str


@dataclass(frozen=True)
class AddToGroup:
    group_name: str
    user_id: str


@dataclass(frozen=True)
class RemoveFromGroup:
    group_name: str
    user_id: str


OperationKind = Union[
    Broadcast,
    SendToUser,
    SendToGroup,
    AddToGroup,
    RemoveFromGroup,
]

# Operations that deliver a PayloadMessage body
SEND_OPERATIONS = (Broadcast, SendToUser, SendToGroup)


@dataclass(frozen=True)
class Accepted:
    def raise_for_status(self) -> None:
        pass


@dataclass(frozen=True)
class Rejected:
    status_code: int

    def raise_for_status(self) -> None:
        raise ServiceRejected(self.status_code)


Outcome = Union[Accepted, Rejected]
