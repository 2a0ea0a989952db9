import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from github_api.exceptions import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    body: str


class HttpTransport:
    """Performs a single HTTP round trip and hands back the undecoded body.

    Non-2xx responses are returned like any other; only connection-level
    failures raise.
    """

    def __init__(self, transport: httpx.BaseTransport | None = None) -> None:
        self._transport = transport

    def execute(
        self,
        method: str,
        url: str,
        parameters: Mapping[str, Any] | None = None,
        *,
        user_agent: str | None = None,
        timeout: float = 20,
    ) -> TransportResponse:
        method = method.upper()
        params = dict(parameters or {})
        headers = {"User-Agent": user_agent} if user_agent else {}

        with httpx.Client(
            transport=self._transport, timeout=timeout, headers=headers
        ) as client:
            try:
                if method == "POST":
                    response = client.post(url, data=params)
                else:
                    response = client.request(method, url, params=params or None)
            except httpx.TransportError as exc:
                logger.error("%s %s failed: %s", method, url, exc)
                raise TransportError(f"{method} {url} failed: {exc}") from exc

        return TransportResponse(status_code=response.status_code, body=response.text)
