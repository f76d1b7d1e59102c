"""Main FastAPI application for the Collections Call-Assist Service."""

import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from call_assist.api.accounts import router as accounts_router
from call_assist.api.call_assist import router as call_assist_router
from call_assist.api.health import router as health_router
from call_assist.config import get_settings
from call_assist.core.dependencies import get_gemini_client
from call_assist.core.exceptions import BaseAPIException, get_user_friendly_error_message
from call_assist.core.logging import get_correlation_id, get_logger, setup_logging
from call_assist.core.middleware import CorrelationIDMiddleware

# Get settings
settings = get_settings()

# Initialize logging
setup_logging(settings.log_level)
logger = get_logger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="AI call scripts, call summaries and account ranking for collections agents",
    version=settings.version,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(CorrelationIDMiddleware)

# CORS middleware
if settings.enable_cors:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Include API routers
app.include_router(health_router, prefix=settings.api_prefix, tags=["health"])
app.include_router(accounts_router, prefix=settings.api_prefix, tags=["accounts"])
app.include_router(call_assist_router, prefix=settings.api_prefix, tags=["call-assist"])


@app.exception_handler(BaseAPIException)
async def api_exception_handler(request: Request, exc: BaseAPIException):
    """Render service exceptions with their error code and correlation ID."""
    correlation_id = get_correlation_id()
    if correlation_id:
        exc.correlation_id = correlation_id
    content = exc.to_dict()
    content["user_message"] = get_user_friendly_error_message(exc.error_code)
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=exc.headers,
    )


@app.on_event("startup")
async def startup_event():
    """Initialize application on startup."""
    app.state.start_time = time.time()
    logger.info("Starting Collections Call-Assist Service", version=settings.version)

    if not get_gemini_client().is_configured:
        logger.warning(
            "Gemini API key not configured; call scripts and summaries will use fallback content",
            setting="GEMINI_API_KEY",
        )

    logger.info("Service startup complete")


@app.on_event("shutdown")
async def shutdown_event():
    """Cleanup on shutdown."""
    logger.info("Shutting down Collections Call-Assist Service")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "call_assist.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
