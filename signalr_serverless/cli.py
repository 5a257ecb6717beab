import argparse
import asyncio
import logging
import os
from enum import Enum
from typing import Callable, List, Optional

from .client import ServerlessClient
from .commands import HELP_TEXT, Quit, parse_command
from .exceptions import (
    InvalidConnectionString,
    ServiceRejected,
    TransportFailure,
    UnrecognizedCommand,
    UnrecognizedSubcommand,
)

CONNECTION_STRING_ENV = "Azure__SignalR__ConnectionString"
HUB_NAME_ENV = "SIGNALR_HUB_NAME"
LOG_LEVEL_ENV = "SIGNALR_LOG_LEVEL"
DEFAULT_HUB_NAME = "chat"


def _describe_failure(error: TransportFailure) -> str:
    cause = error.__cause__
    if cause is None:
        return str(error)
    # Timeouts carry no message
    return str(cause) or repr(cause)


class LoopState(str, Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class CommandLoop:
    def __init__(
        self,
        client: ServerlessClient,
        input_func: Callable[[], str] = input,
        output: Callable[[str], None] = print,
        logger: Optional[logging.Logger] = None,
    ):
        self._client = client
        self._input = input_func
        self._output = output
        self.logger = logger or logging.getLogger(__name__)
        self.state = LoopState.RUNNING

    async def step(self, line: str) -> LoopState:
        try:
            command = parse_command(line)
        except UnrecognizedSubcommand as e:
            self._output(f"Can't recognize command {e}")
            return self.state
        except UnrecognizedCommand:
            self._output(f"Can't recognize command {line}")
            return self.state
        if command is None:
            return self.state
        if isinstance(command, Quit):
            self.state = LoopState.TERMINATED
            return self.state
        try:
            outcome = await self._client.send(command)
            outcome.raise_for_status()
        except ServiceRejected as e:
            self._output(f"Sent error: {e.status_code}")
        except TransportFailure as e:
            self._output(f"Transport failure: {_describe_failure(e)}")
        return self.state

    async def _read_line(self) -> str:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._input)

    async def run(self) -> None:
        self._output(HELP_TEXT)
        while self.state == LoopState.RUNNING:
            try:
                line = await self._read_line()
            except EOFError:
                self.logger.debug("Input closed")
                self.state = LoopState.TERMINATED
                break
            await self.step(line)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="signalr-serverless",
        description="Send messages and manage groups through the hub REST API",
    )
    parser.add_argument(
        "connection_string",
        nargs="?",
        default=os.environ.get(CONNECTION_STRING_ENV),
        help=f"service connection string (default: ${CONNECTION_STRING_ENV})",
    )
    parser.add_argument(
        "hub_name",
        nargs="?",
        default=os.environ.get(HUB_NAME_ENV, DEFAULT_HUB_NAME),
        help=f"hub name (default: ${HUB_NAME_ENV} or {DEFAULT_HUB_NAME})",
    )
    return parser


async def _serve(connection_string: str, hub_name: str) -> None:
    async with ServerlessClient(connection_string, hub_name) as client:
        await CommandLoop(client).run()


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.connection_string:
        parser.error(f"connection string is required (or set {CONNECTION_STRING_ENV})")
    logging.basicConfig(level=os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
    try:
        asyncio.run(_serve(args.connection_string, args.hub_name))
    except InvalidConnectionString as e:
        parser.error(str(e))
