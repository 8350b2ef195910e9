"""Scheduling business logic service."""
import asyncio
from typing import Any, Dict

from schemas.schedule import ScheduleRequest
from src.bridge.email_relay import EmailRelay


async def relay_schedule_request(relay: EmailRelay, request: ScheduleRequest) -> Dict[str, Any]:
    """Send one scheduling message through the relay."""
    loop = asyncio.get_event_loop()
    result = await loop.run_in_executor(None, relay.send, request)
    return {"ok": result.ok, "message": result.message}
