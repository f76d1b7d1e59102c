"""
Configuration and environment variables for the Collections Call-Assist Service.
"""
from typing import List, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

API_KEY_PLACEHOLDER = "your_gemini_api_key_here"


class Settings(BaseSettings):
    """Application settings."""

    # Service Configuration
    app_name: str = "Collections Call-Assist Service"
    version: str = "1.0.0"
    debug: bool = False

    # API Configuration
    api_prefix: str = "/api/v1"

    # Host and Port
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging
    log_level: str = "INFO"

    # Gemini Configuration
    gemini_api_key: Optional[str] = None
    gemini_api_url: str = (
        "https://generativelanguage.googleapis.com/v1beta/models/"
        "gemini-2.0-flash:generateContent"
    )
    gemini_temperature: float = 0.7
    gemini_top_k: int = 40
    gemini_top_p: float = 0.95
    gemini_max_output_tokens: int = 1024
    gemini_timeout_seconds: float = 30.0

    # Minimum spacing between outbound Gemini calls
    request_min_interval_ms: int = Field(default=1000, ge=0)

    # CORS
    enable_cors: bool = True
    cors_origins: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    @field_validator("cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, (list, str)):
            return v
        raise ValueError(v)

    @field_validator("gemini_temperature")
    @classmethod
    def validate_temperature(cls, v: float) -> float:
        if not 0.0 <= v <= 2.0:
            raise ValueError("Gemini temperature must be between 0.0 and 2.0")
        return v

    @field_validator("gemini_top_p")
    @classmethod
    def validate_top_p(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("Gemini topP must be between 0.0 and 1.0")
        return v

    @property
    def gemini_configured(self) -> bool:
        """True when a usable Gemini credential is present."""
        key = (self.gemini_api_key or "").strip()
        return bool(key) and key != API_KEY_PLACEHOLDER

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings
