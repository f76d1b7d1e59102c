"""
Health check endpoint for the Collections Call-Assist Service.
"""
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from call_assist.config import settings
from call_assist.core.dependencies import get_gemini_client
from call_assist.core.logging import get_logger
from call_assist.models.schemas import HealthResponse
from call_assist.services.gemini_client import GeminiClient

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health", response_model=HealthResponse)
async def health_check(
    request: Request,
    client: GeminiClient = Depends(get_gemini_client),
):
    """
    Basic health check endpoint.

    Returns service status, version, uptime and whether the AI backend is
    configured. The backend itself is not called.
    """
    start_time = getattr(request.app.state, "start_time", time.time())
    uptime = time.time() - start_time

    response = HealthResponse(
        status="healthy",
        version=settings.version,
        uptime_seconds=uptime,
        timestamp=datetime.now(timezone.utc),
        service_name=settings.app_name,
        ai_configured=client.is_configured,
    )

    logger.info(
        "Health check completed",
        status=response.status,
        uptime_seconds=round(response.uptime_seconds, 2),
        ai_configured=response.ai_configured,
    )

    return response
