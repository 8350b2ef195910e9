"""Shared FastAPI dependencies."""
from functools import lru_cache

from fastapi import HTTPException

from src.bridge.email_relay import EmailRelay
from src.config.settings import get_settings
from src.inference.client import InferenceClient


@lru_cache()
def get_app_settings():
    """Return cached settings instance for FastAPI dependency injection."""
    return get_settings()


def get_inference_client() -> InferenceClient:
    """Fresh client per request; gateway requests share no state."""
    return InferenceClient.from_settings(get_app_settings())


def get_email_relay() -> EmailRelay:
    settings = get_app_settings()
    if not settings.email_relay_configured:
        raise HTTPException(status_code=503, detail="Scheduling relay is not configured.")
    return EmailRelay.from_settings(settings)
