from .client import ServerlessClient as Client
from .commands import parse_command
from .connection import Dispatcher, HubRequest, build_request
from .endpoint import HubEndpoint, base_hub_path
from .messages import (
    Accepted,
    AddToGroup,
    Broadcast,
    Rejected,
    RemoveFromGroup,
    SendToGroup,
    SendToUser,
)
from .routes import HttpMethod, resolve_route

__all__ = (
    "Accepted",
    "AddToGroup",
    "Broadcast",
    "Client",
    "Dispatcher",
    "HttpMethod",
    "HubEndpoint",
    "HubRequest",
    "Rejected",
    "RemoveFromGroup",
    "SendToGroup",
    "SendToUser",
    "base_hub_path",
    "build_request",
    "parse_command",
    "resolve_route",
)
