"""
Conversation and session policy settings.

Dependencies: pydantic, pydantic_settings
System role: History window, retention and quota configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from askpdf.configs.base import BaseSettings


class ConversationSettings(BaseSettings):
    """History windowing and per-owner session limits."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CONVERSATION_",
        case_sensitive=False,
        extra="ignore",
    )

    history_window: int = Field(
        default=6,
        ge=0,
        description="Most recent turns included in the generation prompt",
    )
    history_retention: Literal["window", "full"] = Field(
        default="window",
        description=(
            "'window' persists the prompt window plus the new pair; "
            "'full' appends the new pair to the complete stored history"
        ),
    )
    max_sessions_per_owner: int = Field(
        default=3,
        ge=1,
        description="Concurrent sessions allowed per caller identity",
    )
