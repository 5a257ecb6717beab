import logging
import socket
import uuid
from types import TracebackType
from typing import Optional, Type

import aiohttp

from .auth import ServiceUtils, TokenProvider
from .connection import Dispatcher, HubRequest, build_request
from .endpoint import HubEndpoint
from .messages import (
    SEND_OPERATIONS,
    OperationKind,
    Outcome,
    PayloadMessage,
    Rejected,
)
from .routes import resolve_route

DEFAULT_TARGET = "SendMessage"
DEFAULT_MESSAGE = "Hello from server"


def generate_server_name() -> str:
    return f"{socket.gethostname()}_{uuid.uuid4().hex}"


class ServerlessClient:
    def __init__(
        self,
        connection_string: str,
        hub_name: str,
        session: Optional[aiohttp.ClientSession] = None,
        token_provider: Optional[TokenProvider] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.service_utils = ServiceUtils.from_connection_string(connection_string)
        self.endpoint = HubEndpoint(self.service_utils.endpoint, hub_name)
        self.server_name = generate_server_name()
        self.default_payload = PayloadMessage(
            target=DEFAULT_TARGET,
            arguments=[self.server_name, DEFAULT_MESSAGE],
        )
        self._token_provider = token_provider or self.service_utils.generate_access_token
        self._session = session
        self._owns_session = session is None
        self._dispatcher: Optional[Dispatcher] = None
        if session is not None:
            self._dispatcher = Dispatcher(session, self.logger)

    async def __aenter__(self) -> "ServerlessClient":
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.stop()

    async def start(self) -> None:
        if self._dispatcher is None:
            self._session = aiohttp.ClientSession()
            self._dispatcher = Dispatcher(self._session, self.logger)
            self.logger.debug("Session created")

    async def stop(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
            self._dispatcher = None
            self.logger.debug("Session closed")

    def prepare(self, kind: OperationKind) -> HubRequest:
        path, method = resolve_route(kind, self.endpoint.path)
        body = self.default_payload if isinstance(kind, SEND_OPERATIONS) else None
        return build_request(path, method, self.server_name, self._token_provider, body)

    async def send(self, kind: OperationKind) -> Outcome:
        if self._dispatcher is None:
            raise RuntimeError("Client is not started")
        outcome = await self._dispatcher.dispatch(self.prepare(kind))
        if isinstance(outcome, Rejected):
            self.logger.warning(f"{kind} rejected with status {outcome.status_code}")
        return outcome
