"""Schedule router for the meeting request form."""
from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_email_relay
from schemas.schedule import ScheduleRequest, ScheduleResponse
from services.schedule_service import relay_schedule_request
from src.bridge.email_relay import EmailRelay

router = APIRouter()


@router.post("/schedule", response_model=ScheduleResponse)
async def schedule(request: ScheduleRequest, relay: EmailRelay = Depends(get_email_relay)):
    """Relay a scheduling message by email."""
    result = await relay_schedule_request(relay, request)
    if not result["ok"]:
        raise HTTPException(status_code=502, detail=result["message"])
    return ScheduleResponse(success=True, message=result["message"])
