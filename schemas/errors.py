"""Typed error values returned by the inference client."""
from typing import Literal, Optional

from pydantic import BaseModel


class ValidationError(BaseModel):
    """A required input was missing; no request was sent."""
    kind: Literal["validation"] = "validation"
    field: Literal["question", "profile"]

    @property
    def message(self) -> str:
        return f"missing {self.field}"


class TransportError(BaseModel):
    """The exchange with the inference service failed.

    ``status_code`` is None when no HTTP response was received at all.
    """
    kind: Literal["transport"] = "transport"
    status_code: Optional[int] = None
    detail: Optional[str] = None

    @property
    def message(self) -> str:
        if self.status_code is None:
            return f"inference service unreachable: {self.detail or 'network error'}"
        if self.detail:
            return f"inference service error (HTTP {self.status_code}): {self.detail}"
        return f"inference service error (HTTP {self.status_code})"
