"""Query request/response models."""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Profile(str, Enum):
    """Simulated-respondent segments the remote model can answer as."""

    CDMX_YOUNG = "cdmx_c-d+_18-25"
    MTY_MIDDLE = "mty_c+b_35-55"

    @property
    def label(self) -> str:
        return PROFILE_LABELS[self]


PROFILE_LABELS = {
    Profile.CDMX_YOUNG: "CDMX · C-D+ · 18–25",
    Profile.MTY_MIDDLE: "Monterrey · C+B · 35–55",
}


class Query(BaseModel):
    """A validated question bound to one profile."""
    question: str
    profile: Profile


class QueryResult(BaseModel):
    """Parsed outcome of one successful exchange."""
    raw_text: str
    extracted_answer: str


class AskRequest(BaseModel):
    """Request model for the gateway ask endpoint.

    Both fields are optional at the schema level so that missing input
    reaches the client's own validation and yields its error message.
    """
    question: Optional[str] = None
    profile: Optional[str] = None


class AskResponse(BaseModel):
    """Response model for the gateway ask endpoint."""
    response: str = Field(..., description="Full transcript returned by the model")
    answer: str = Field(..., description="Segment following the last answer marker")
    profile: Profile
