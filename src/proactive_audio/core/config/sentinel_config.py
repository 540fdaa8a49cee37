from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIDENCE_THRESHOLD = 0.9


class SentinelConfig(BaseSettings):
    """
    Runtime settings for the proactive-audio tooling.

    Attributes:
        log_level: Log level of the ``proactive_audio`` logger.
        gemini_api_key: Key for the live session owner. Only reported, never required.
        output_format: Output format of the CLI.
        confidence_threshold: Minimum verification confidence before the
            policy simulator breaks silence.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )
    log_level: str = Field(default="INFO")
    gemini_api_key: SecretStr | None = None
    output_format: Literal["text", "json"] = "text"
    confidence_threshold: float = Field(
        default=DEFAULT_CONFIDENCE_THRESHOLD, ge=0.0, le=1.0
    )

    @field_validator("log_level")
    def normalize_log_level(cls, v):
        return v.upper()


def load_sentinel_config() -> SentinelConfig:
    """Load the config from environment variables and ``.env``."""
    return SentinelConfig()
