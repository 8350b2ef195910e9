"""Ask business logic service."""
import asyncio
from typing import Any, Dict, Optional

from schemas.errors import ValidationError
from schemas.query import QueryResult
from src.inference.client import InferenceClient


async def process_question(
    client: InferenceClient,
    question: Optional[str],
    profile: Optional[str],
) -> Dict[str, Any]:
    """
    Forward one question to the inference service.

    The client call is blocking, so it runs in the default thread pool.

    Args:
        client: Client bound to the configured inference endpoint
        question: Free-text question as received
        profile: Profile literal as received

    Returns:
        Dictionary with ``ok`` and either the parsed answer or an error
        message with the HTTP status the gateway should answer with.
    """
    loop = asyncio.get_event_loop()
    outcome = await loop.run_in_executor(None, client.submit, question, profile)

    if isinstance(outcome, QueryResult):
        query = client.query
        return {
            "ok": True,
            "message": "Success",
            "response": outcome.raw_text,
            "answer": outcome.extracted_answer,
            "profile": query.profile if query else profile,
        }

    if isinstance(outcome, ValidationError):
        return {"ok": False, "status_code": 400, "message": outcome.message}

    return {"ok": False, "status_code": 502, "message": outcome.message}
