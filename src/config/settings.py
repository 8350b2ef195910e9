from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized configuration loaded from environment variables or .env."""

    inference_base_url: str = Field(..., alias="INFERENCE_BASE_URL")
    inference_ask_path: str = Field("/ask", alias="INFERENCE_ASK_PATH")
    inference_timeout: Optional[float] = Field(None, alias="INFERENCE_TIMEOUT")
    answer_marker: str = Field("### Respuesta:", alias="ANSWER_MARKER", min_length=1)

    emailjs_service_id: Optional[str] = Field(None, alias="EMAILJS_SERVICE_ID")
    emailjs_template_id: Optional[str] = Field(None, alias="EMAILJS_TEMPLATE_ID")
    emailjs_public_key: Optional[str] = Field(None, alias="EMAILJS_PUBLIC_KEY")
    emailjs_api_url: str = Field(
        "https://api.emailjs.com/api/v1.0/email/send", alias="EMAILJS_API_URL"
    )

    cors_origins: List[str] = Field(["http://localhost:5173"], alias="CORS_ORIGINS")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def inference_endpoint(self) -> str:
        """Full URL of the remote ask endpoint."""
        path = self.inference_ask_path
        if not path.startswith("/"):
            path = "/" + path
        return self.inference_base_url.rstrip("/") + path

    @property
    def email_relay_configured(self) -> bool:
        return bool(
            self.emailjs_service_id and self.emailjs_template_id and self.emailjs_public_key
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()  # type: ignore[arg-type]
