"""AI client management for the optional completion fallback."""
from .client_factory import AIClientFactory, AIRequestContext
from .retry import create_retry_decorator, is_retryable_error, retry_sync_call

__all__ = [
    "AIClientFactory",
    "AIRequestContext",
    "create_retry_decorator",
    "is_retryable_error",
    "retry_sync_call",
]
