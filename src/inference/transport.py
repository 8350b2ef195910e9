from __future__ import annotations

from typing import Any, Dict, Optional

import requests
from loguru import logger
from pydantic import BaseModel


class TransportReply(BaseModel):
    """Status and decoded body of one completed HTTP exchange."""

    status_code: int
    body: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HttpTransport:
    """
    JSON-over-HTTP transport backed by ``requests``.

    The body is decoded only for 2xx replies. Network-level failures
    propagate as ``requests.RequestException``.
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = timeout

    def post_json(self, url: str, payload: Dict[str, Any]) -> TransportReply:
        logger.debug("POST {} timeout={}", url, self.timeout)
        resp = requests.post(url, json=payload, timeout=self.timeout)
        reply = TransportReply(status_code=resp.status_code)
        if reply.ok:
            try:
                reply.body = resp.json()
            except ValueError:
                logger.warning("Non-JSON body from {} (HTTP {})", url, resp.status_code)
        return reply
