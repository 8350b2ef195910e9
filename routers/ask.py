"""Ask router forwarding questions to the inference service."""
from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_inference_client
from schemas.query import AskRequest, AskResponse
from services.ask_service import process_question
from src.inference.client import InferenceClient

router = APIRouter()


@router.post("/ask", response_model=AskResponse)
async def ask(request: AskRequest, client: InferenceClient = Depends(get_inference_client)):
    """
    Submit a question as one of the simulated-respondent profiles.

    Returns the full model transcript and the answer segment that follows
    the last answer marker. Missing input is a 400; any failure talking to
    the inference service is a 502.
    """
    result = await process_question(client, request.question, request.profile)
    if not result.get("ok"):
        raise HTTPException(status_code=result["status_code"], detail=result["message"])
    return AskResponse(
        response=result["response"],
        answer=result["answer"],
        profile=result["profile"],
    )
