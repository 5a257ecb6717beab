from enum import Enum
from typing import Tuple

from .messages import (
    AddToGroup,
    Broadcast,
    OperationKind,
    RemoveFromGroup,
    SendToGroup,
    SendToUser,
)


class HttpMethod(str, Enum):
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


def resolve_route(kind: OperationKind, hub_path: str) -> Tuple[str, HttpMethod]:
    """Map an operation to its resource path and HTTP method.

    Add and remove target the same membership resource and differ only by method.
    """
    if isinstance(kind, Broadcast):
        return hub_path, HttpMethod.POST
    elif isinstance(kind, SendToUser):
        return f"{hub_path}/users/{kind.user_id}", HttpMethod.POST
    elif isinstance(kind, SendToGroup):
        return f"{hub_path}/groups/{kind.group_name}", HttpMethod.POST
    elif isinstance(kind, AddToGroup):
        return (
            f"{hub_path}/groups/{kind.group_name}/users/{kind.user_id}",
            HttpMethod.PUT,
        )
    elif isinstance(kind, RemoveFromGroup):
        return (
            f"{hub_path}/groups/{kind.group_name}/users/{kind.user_id}",
            HttpMethod.DELETE,
        )
    else:
        raise TypeError(f"Unknown operation {kind!r}")
