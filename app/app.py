"""FastAPI application setup."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.dependencies import get_app_settings
from routers import ask, health, schedule
from src.config.log_setup import configure_logging

settings = get_app_settings()
configure_logging(settings.log_level)

app = FastAPI(
    title="Segment Voices Gateway",
    description="Forwards demo questions to the inference service and relays scheduling requests",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(ask.router, tags=["Ask"])
app.include_router(schedule.router, prefix="/api", tags=["Schedule"])
app.include_router(health.router, tags=["Health"])
