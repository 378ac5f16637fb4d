"""AI client factory for the optional completion fallback."""
import logging
from dataclasses import dataclass, field
from typing import Any

from gymnotes_parser.config import settings


logger = logging.getLogger(__name__)

# Attribution headers OpenRouter shows on its dashboard
_APP_REFERER = "https://gymnotes.app"
_APP_TITLE = "GymNotes - Workout Tracker"


@dataclass
class AIRequestContext:
    """Context for AI requests, used for tracking and observability."""

    user_id: str | None = None
    feature_name: str | None = None
    request_id: str | None = None
    custom_properties: dict[str, str] = field(default_factory=dict)

    def to_tracking_headers(self) -> dict[str, str]:
        """Convert context to request headers sent with every completion."""
        headers: dict[str, str] = {
            "HTTP-Referer": _APP_REFERER,
            "X-Title": _APP_TITLE,
        }

        if self.user_id:
            headers["X-User-Id"] = self.user_id

        if self.feature_name:
            headers["X-Feature"] = self.feature_name

        if self.request_id:
            headers["X-Request-Id"] = self.request_id

        headers["X-Environment"] = settings.ENVIRONMENT

        for key, value in self.custom_properties.items():
            header_key = f"X-Property-{key.replace('_', '-').title()}"
            headers[header_key] = str(value)

        return headers


class AIClientFactory:
    """Factory for OpenAI-compatible clients (OpenRouter by default)."""

    @staticmethod
    def create_openai_client(
        context: AIRequestContext | None = None,
        timeout: float | None = None,
    ) -> Any:
        """
        Create an OpenAI client pointed at the configured completion endpoint.

        Args:
            context: Request context for tracking headers
            timeout: Client timeout in seconds (defaults to AI_FALLBACK_TIMEOUT)

        Returns:
            OpenAI client instance

        Raises:
            ImportError: If openai package is not installed
            ValueError: If the API key is not configured
        """
        try:
            import openai
        except ImportError as e:
            raise ImportError("OpenAI library not installed. Run: pip install openai") from e

        api_key = settings.OPENROUTER_API_KEY
        if not api_key:
            raise ValueError("AI fallback API key not configured. Set OPENROUTER_API_KEY environment variable.")

        client_kwargs: dict[str, Any] = {
            "api_key": api_key,
            "base_url": settings.AI_FALLBACK_BASE_URL,
            "timeout": timeout if timeout is not None else settings.AI_FALLBACK_TIMEOUT,
            "default_headers": (context or AIRequestContext()).to_tracking_headers(),
        }

        logger.debug(f"Creating OpenAI client for {settings.AI_FALLBACK_BASE_URL}")

        return openai.OpenAI(**client_kwargs)
