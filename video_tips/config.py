"""Application configuration loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from video_tips.tip_generator.constants import GEMINI_TIMEOUT_SECONDS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Provider credential; empty means "not configured"
    gemini_api_key: str = ""

    # Ordered retry policy: primary first, fallback second
    gemini_model_primary: str = "gemini-2.5-flash"
    gemini_model_fallback: str = "gemini-2.5-pro"

    # Per-attempt deadline
    gemini_timeout_seconds: float = GEMINI_TIMEOUT_SECONDS

    log_level: str = "INFO"


settings = Settings()
