"""
Shared settings base for AskPDF.

Every settings group derives from this class so that they all read the same
.env file, ignore unknown variables and expose the deployment environment,
debug flag and log level.

Dependencies: pydantic, pydantic_settings
System role: Root of the configuration hierarchy
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings fields and .env loading shared by every AskPDF config group."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Deployment name (development, staging, production)",
    )
    debug: bool = Field(
        default=False,
        description="Run the development server with auto-reload",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level passed to configure_logging",
    )
