"""
Dependency injection for FastAPI application.

Provides factory functions for the process-wide service instances. The
Gemini client is cached so every request shares one throttle window.
"""

from functools import lru_cache
from fastapi import Depends

from call_assist.config import get_settings
from call_assist.core.throttle import RequestThrottle
from call_assist.services.account_repository import AccountRepository
from call_assist.services.call_assist_service import CallAssistService
from call_assist.services.gemini_client import GeminiClient


@lru_cache()
def get_gemini_client() -> GeminiClient:
    """Get the shared Gemini client."""
    settings = get_settings()
    throttle = RequestThrottle(min_interval_seconds=settings.request_min_interval_ms / 1000)
    return GeminiClient(settings=settings, throttle=throttle)


@lru_cache()
def get_account_repository() -> AccountRepository:
    """Get the account store."""
    return AccountRepository()


def get_call_assist_service(
    client: GeminiClient = Depends(get_gemini_client),
) -> CallAssistService:
    """
    Get call-assist service with the shared client injected.

    Args:
        client: Process-wide Gemini client

    Returns:
        Configured CallAssistService instance
    """
    return CallAssistService(client=client)
