from __future__ import annotations

from typing import Any, Dict, Optional

import requests
from loguru import logger
from pydantic import BaseModel

from schemas.schedule import ScheduleRequest
from src.config.settings import Settings, get_settings


class RelayResult(BaseModel):
    ok: bool
    message: str


class EmailRelay:
    """
    Scheduling bridge to an EmailJS-style REST relay.

    - One POST per message, no retries or queueing.
    - Failures come back as ``RelayResult(ok=False)`` with a message fit for display.
    """

    def __init__(
        self,
        service_id: str,
        template_id: str,
        public_key: str,
        api_url: str = "https://api.emailjs.com/api/v1.0/email/send",
        timeout: Optional[float] = None,
    ) -> None:
        self.service_id = service_id
        self.template_id = template_id
        self.public_key = public_key
        self.api_url = api_url
        self.timeout = timeout
        logger.debug(
            "Initialized EmailRelay service_id={} template_id={} api_url={}",
            service_id,
            template_id,
            api_url,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "EmailRelay":
        settings = settings or get_settings()
        if not settings.email_relay_configured:
            raise RuntimeError(
                "EMAILJS_SERVICE_ID, EMAILJS_TEMPLATE_ID and EMAILJS_PUBLIC_KEY are required"
            )
        return cls(
            service_id=settings.emailjs_service_id,  # type: ignore[arg-type]
            template_id=settings.emailjs_template_id,  # type: ignore[arg-type]
            public_key=settings.emailjs_public_key,  # type: ignore[arg-type]
            api_url=settings.emailjs_api_url,
        )

    def _payload(self, request: ScheduleRequest) -> Dict[str, Any]:
        params = {
            "from_name": request.name,
            "reply_to": request.email,
            "message": request.message,
        }
        if request.preferred_date:
            params["preferred_date"] = request.preferred_date
        return {
            "service_id": self.service_id,
            "template_id": self.template_id,
            "user_id": self.public_key,
            "template_params": params,
        }

    def send(self, request: ScheduleRequest) -> RelayResult:
        try:
            resp = requests.post(self.api_url, json=self._payload(request), timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("Email relay unreachable: {}", exc)
            return RelayResult(ok=False, message="Could not reach the scheduling service. Please try again later.")

        if not resp.ok:
            logger.error("Email relay rejected message: HTTP {} {}", resp.status_code, resp.text[:200])
            return RelayResult(ok=False, message="The scheduling request could not be sent. Please try again later.")

        logger.debug("Scheduling message relayed via template {}", self.template_id)
        return RelayResult(ok=True, message="Your request has been sent. I will get back to you soon.")
