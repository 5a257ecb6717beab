import asyncio
import json
import logging
from dataclasses import asdict, dataclass, field
from typing import Dict, Optional, Tuple

import aiohttp
import yarl

from .auth import TokenProvider
from .exceptions import TransportFailure
from .messages import Accepted, Outcome, PayloadMessage, Rejected
from .routes import HttpMethod

JSON_CONTENT_TYPE = "application/json"


@dataclass
class HubRequest:
    method: HttpMethod
    url: yarl.URL
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None


def build_request(
    path: str,
    method: HttpMethod,
    sender_id: str,
    token_provider: TokenProvider,
    body: Optional[PayloadMessage] = None,
) -> HubRequest:
    # The token is minted for this exact path and never reused
    headers = {
        "Authorization": f"Bearer {token_provider(path, sender_id)}",
        "Accept": JSON_CONTENT_TYPE,
    }
    data = None
    if body is not None:
        headers["Content-Type"] = JSON_CONTENT_TYPE
        data = json.dumps(asdict(body))
    return HubRequest(
        method=method,
        url=yarl.URL(path),
        headers=headers,
        body=data,
    )


class Dispatcher:
    accepted_status: int = 202

    def __init__(
        self,
        session: aiohttp.ClientSession,
        logger: Optional[logging.Logger] = None,
    ):
        self._session = session
        self.logger = logger or logging.getLogger(__name__)

    def _skipped_headers(self, request: HubRequest) -> Tuple[str, ...]:
        # Body-less membership requests go out without a Content-Type
        return ("Content-Type",) if request.body is None else ()

    async def dispatch(self, request: HubRequest) -> Outcome:
        self.logger.debug(f"Sending {request.method.value} {request.url}")
        try:
            # Response body is never read, leaving the context releases the connection
            async with self._session.request(
                request.method.value,
                request.url,
                headers=request.headers,
                data=request.body,
                skip_auto_headers=self._skipped_headers(request),
            ) as resp:
                status = resp.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger.debug(f"Request to {request.url} failed: {e!r}")
            raise TransportFailure(f"Request to {request.url} failed") from e
        self.logger.debug(f"Response status: {status}")
        if status == self.accepted_status:
            return Accepted()
        return Rejected(status)
