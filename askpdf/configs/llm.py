"""
Text-generation provider configuration.

Dependencies: pydantic, pydantic_settings
System role: Chat model configuration for answer generation
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from askpdf.configs.base import BaseSettings


class LLMSettings(BaseSettings):
    """Chat model, timeout and retry configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
    )

    model_id: str = Field(default="gemini-2.0-flash", description="Google Gemini chat model ID")
    temperature: float = Field(default=0.0, ge=0.0, le=2.0, description="Model temperature")
    generation_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Upper bound for a single generation call",
    )
    max_retries: int = Field(
        default=3,
        ge=1,
        description="Attempts for transient upstream failures (1 disables retry)",
    )
    retry_backoff_seconds: float = Field(
        default=1.0,
        ge=0.0,
        description="Initial exponential backoff between retries",
    )
