"""
Gemini generateContent client.

This is the only network boundary of the call-assist service. Each call to
``invoke`` makes at most one HTTP request and reports failures as a
``BackendResult`` instead of raising, so callers decide how to degrade.
"""
from typing import Any, Dict, Optional

import httpx
import structlog

from call_assist.config import API_KEY_PLACEHOLDER, Settings, get_settings
from call_assist.core.exceptions import (
    BackendEmptyResponseError,
    BackendHTTPStatusError,
    BackendNotConfiguredError,
    BackendReportedError,
    BackendTransportError,
    GenerativeBackendError,
)
from call_assist.core.logging import mask_secret
from call_assist.core.throttle import RequestThrottle
from call_assist.models.generation import BackendResult

logger = structlog.get_logger(__name__)


class GeminiClient:
    """Client for the Gemini generative-language REST API."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        throttle: Optional[RequestThrottle] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self.api_key = self.settings.gemini_api_key
        self.api_url = self.settings.gemini_api_url
        self.timeout = self.settings.gemini_timeout_seconds
        self.throttle = throttle or RequestThrottle(
            min_interval_seconds=self.settings.request_min_interval_ms / 1000
        )
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        """True when an API key other than the placeholder is present."""
        return self.settings.gemini_configured

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        """Request body for one generateContent call."""
        return {
            "contents": [{"parts": [{"text": prompt}]}],
            "generationConfig": {
                "temperature": self.settings.gemini_temperature,
                "topK": self.settings.gemini_top_k,
                "topP": self.settings.gemini_top_p,
                "maxOutputTokens": self.settings.gemini_max_output_tokens,
            },
        }

    async def invoke(self, prompt: str) -> BackendResult:
        """
        Send one prompt to Gemini.

        An unconfigured client fails before the throttle: the call neither
        waits nor uses up a throttle window.

        Args:
            prompt: Fully rendered instruction text

        Returns:
            BackendResult holding the first candidate's text verbatim, or the
            classified error
        """
        if not self.is_configured:
            error = BackendNotConfiguredError()
            logger.error(
                "Gemini API key not configured",
                has_key=bool(self.api_key),
                key_value=mask_secret(self.api_key, visible=10),
                is_placeholder=self.api_key == API_KEY_PLACEHOLDER,
            )
            return BackendResult.failure(error)

        await self.throttle.acquire()

        logger.info(
            "Calling Gemini API",
            prompt_length=len(prompt),
            api_key=mask_secret(self.api_key),
        )

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.api_url,
                    params={"key": self.api_key},
                    json=self.build_payload(prompt),
                )
        except httpx.HTTPError as e:
            return self._fail(BackendTransportError(f"Gemini request failed: {e}", error_type=type(e).__name__))

        if not response.is_success:
            return self._fail(BackendHTTPStatusError(response.status_code))

        try:
            data = response.json()
        except ValueError as e:
            return self._fail(BackendTransportError(f"Unreadable Gemini response body: {e}"))

        if not isinstance(data, dict):
            return self._fail(BackendEmptyResponseError())

        if data.get("error"):
            error_payload = data["error"]
            message = error_payload.get("message") if isinstance(error_payload, dict) else str(error_payload)
            return self._fail(BackendReportedError(message or "Unknown Gemini error"))

        text = self._first_candidate_text(data)
        if text is None:
            return self._fail(BackendEmptyResponseError())

        logger.info("Gemini response received", response_length=len(text))
        return BackendResult.success(text)

    @staticmethod
    def _first_candidate_text(data: Dict[str, Any]) -> Optional[str]:
        candidates = data.get("candidates") or []
        if not candidates:
            return None
        try:
            text = candidates[0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError):
            return None
        return text if isinstance(text, str) else None

    def _fail(self, error: GenerativeBackendError) -> BackendResult:
        logger.error(
            "Gemini API error",
            error_kind=error.kind,
            error=str(error),
            **error.context,
        )
        return BackendResult.failure(error)
