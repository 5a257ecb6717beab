import base64
import hashlib
import hmac
import json
import time
from datetime import timedelta
from typing import Any, Callable, Dict, Optional

import yarl

from .exceptions import InvalidConnectionString

# (resource_url, sender_id) -> bearer token
TokenProvider = Callable[[str, str], str]

DEFAULT_TOKEN_LIFETIME = timedelta(hours=1)


def _b64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def parse_connection_string(connection_string: str) -> Dict[str, str]:
    properties: Dict[str, str] = {}
    for segment in connection_string.split(";"):
        key, sep, value = segment.partition("=")
        if sep and key.strip():
            properties[key.strip().lower()] = value.strip()
    return properties


class ServiceUtils:
    """Credentials of a service instance, able to sign access tokens.

    Tokens are HS256 JWTs signed with the instance access key and scoped to a
    single audience URL.
    """

    def __init__(self, endpoint: str, access_key: str, version: Optional[str] = None):
        self.endpoint = endpoint.rstrip("/")
        self.access_key = access_key
        self.version = version

    @classmethod
    def from_connection_string(cls, connection_string: str) -> "ServiceUtils":
        properties = parse_connection_string(connection_string)
        for required in ("endpoint", "accesskey"):
            if not properties.get(required):
                raise InvalidConnectionString(
                    f"Connection string missing required property {required}"
                )
        endpoint = properties["endpoint"].rstrip("/")
        port = properties.get("port")
        if port:
            try:
                endpoint = str(yarl.URL(endpoint).with_port(int(port))).rstrip("/")
            except ValueError as e:
                raise InvalidConnectionString(f"Invalid port {port}") from e
        return cls(endpoint, properties["accesskey"], properties.get("version"))

    def generate_access_token(
        self,
        audience: str,
        user_id: Optional[str] = None,
        lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
    ) -> str:
        now = int(time.time())
        claims: Dict[str, Any] = {
            "aud": audience,
            "nbf": now,
            "iat": now,
            "exp": now + int(lifetime.total_seconds()),
        }
        if user_id:
            claims["nameid"] = user_id
        header = _b64url(json.dumps({"alg": "HS256", "typ": "JWT"}).encode())
        payload = _b64url(json.dumps(claims).encode())
        signing_input = f"{header}.{payload}"
        signature = hmac.new(
            self.access_key.encode(), signing_input.encode(), hashlib.sha256
        ).digest()
        return f"{signing_input}.{_b64url(signature)}"
