"""Scheduling relay request/response models."""
from typing import Optional

from pydantic import BaseModel


class ScheduleRequest(BaseModel):
    """Message forwarded to the email relay."""
    name: str
    email: str
    message: str
    preferred_date: Optional[str] = None


class ScheduleResponse(BaseModel):
    """Response model for the schedule endpoint."""
    success: bool
    message: str
