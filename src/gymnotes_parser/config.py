"""Configuration settings for the workout entry parser."""
import os
from typing import Literal


EnvironmentType = Literal["development", "staging", "production"]


class Settings:
    """Application settings."""

    # Feature flags
    AI_FALLBACK_ENABLED: bool = False

    # Environment
    ENVIRONMENT: EnvironmentType = "development"

    # AI fallback (OpenAI-compatible endpoint, OpenRouter by default)
    OPENROUTER_API_KEY: str | None = None
    AI_FALLBACK_BASE_URL: str = "https://openrouter.ai/api/v1"
    AI_FALLBACK_MODEL: str = "meta-llama/llama-3.1-8b-instruct:free"
    AI_FALLBACK_TIMEOUT: float = 30.0

    # Input limits
    MAX_LINE_LENGTH: int = 500
    MAX_PLAN_LENGTH: int = 50000

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        # Feature flags
        self.AI_FALLBACK_ENABLED = os.getenv("AI_FALLBACK_ENABLED", "false").lower() == "true"

        # AI fallback
        self.OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY")
        self.AI_FALLBACK_BASE_URL = os.getenv("AI_FALLBACK_BASE_URL", self.AI_FALLBACK_BASE_URL)
        self.AI_FALLBACK_MODEL = os.getenv("AI_FALLBACK_MODEL", self.AI_FALLBACK_MODEL)
        self.AI_FALLBACK_TIMEOUT = _env_float("AI_FALLBACK_TIMEOUT", self.AI_FALLBACK_TIMEOUT)

        # Input limits
        self.MAX_LINE_LENGTH = _env_int("MAX_LINE_LENGTH", self.MAX_LINE_LENGTH)
        self.MAX_PLAN_LENGTH = _env_int("MAX_PLAN_LENGTH", self.MAX_PLAN_LENGTH)


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


settings = Settings()
