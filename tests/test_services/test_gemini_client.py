"""
Tests for the Gemini REST client.
"""
from unittest.mock import AsyncMock

import httpx
import pytest

from call_assist.core.exceptions import (
    BackendEmptyResponseError,
    BackendHTTPStatusError,
    BackendNotConfiguredError,
    BackendReportedError,
    BackendTransportError,
)
from call_assist.core.throttle import RequestThrottle
from call_assist.config import Settings
from call_assist.services.gemini_client import GeminiClient


class TestGeminiClientConfiguration:
    """Test credential handling."""

    async def test_placeholder_key_makes_no_request(self, make_client, make_transport, gemini_reply, unconfigured_settings):
        """A placeholder key fails without touching the network."""
        transport = make_transport(json_body=gemini_reply("unused"))
        client = make_client(transport, client_settings=unconfigured_settings)

        result = await client.invoke("prompt")

        assert not result.ok
        assert isinstance(result.error, BackendNotConfiguredError)
        assert transport.call_count == 0

    @pytest.mark.parametrize("key", [None, "", "   "])
    async def test_missing_key_makes_no_request(self, make_client, make_transport, gemini_reply, key):
        transport = make_transport(json_body=gemini_reply("unused"))
        client = make_client(transport, client_settings=Settings(gemini_api_key=key, _env_file=None))

        result = await client.invoke("prompt")

        assert result.error.kind == "not_configured"
        assert transport.call_count == 0

    async def test_not_configured_skips_throttle(self, unconfigured_settings):
        """The credential check happens before any throttle wait."""
        throttle = RequestThrottle(min_interval_seconds=1.0)
        throttle.acquire = AsyncMock()
        client = GeminiClient(settings=unconfigured_settings, throttle=throttle)

        await client.invoke("prompt")

        throttle.acquire.assert_not_awaited()

    async def test_not_configured_leaves_throttle_window_unused(self, make_transport, gemini_reply, test_settings, unconfigured_settings):
        """Unconfigured calls neither wait nor record a call time."""
        throttle = RequestThrottle(min_interval_seconds=60)
        unconfigured = GeminiClient(settings=unconfigured_settings, throttle=throttle)

        await unconfigured.invoke("prompt")

        assert throttle.last_call_time is None
        configured = GeminiClient(
            settings=test_settings,
            throttle=throttle,
            transport=make_transport(json_body=gemini_reply("ok")),
        )
        result = await configured.invoke("prompt")
        assert result.ok

    def test_is_configured(self, make_client, unconfigured_settings):
        assert make_client().is_configured is True
        assert make_client(client_settings=unconfigured_settings).is_configured is False


class TestGeminiClientRequest:
    """Test the outgoing request."""

    async def test_payload_and_key(self, make_client, make_transport, gemini_reply, test_settings):
        transport = make_transport(json_body=gemini_reply("hello"))
        client = make_client(transport)

        await client.invoke("Write a script")

        assert transport.call_count == 1
        request = transport.requests[0]
        assert request.method == "POST"
        assert request.url.params["key"] == "test-gemini-key-123"
        assert str(request.url).startswith(test_settings.gemini_api_url)
        assert transport.last_json() == {
            "contents": [{"parts": [{"text": "Write a script"}]}],
            "generationConfig": {
                "temperature": 0.7,
                "topK": 40,
                "topP": 0.95,
                "maxOutputTokens": 1024,
            },
        }

    async def test_one_request_per_invoke(self, make_client, make_transport):
        """No retries, even on failure."""
        transport = make_transport(status_code=503, json_body={})
        client = make_client(transport)

        await client.invoke("prompt")

        assert transport.call_count == 1

    async def test_throttle_acquired_before_request(self, make_client, make_transport, gemini_reply):
        transport = make_transport(json_body=gemini_reply("ok"))
        client = make_client(transport)

        await client.invoke("prompt")

        assert client.throttle.last_call_time is not None


class TestGeminiClientResponses:
    """Test classification of backend replies."""

    async def test_success_returns_text_verbatim(self, make_client, make_transport, gemini_reply):
        reply = "  Good morning,\n\nthis is Bizcap Collections.  "
        client = make_client(make_transport(json_body=gemini_reply(reply)))

        result = await client.invoke("prompt")

        assert result.ok
        assert result.text == reply

    async def test_transport_error(self, make_client, make_transport):
        client = make_client(make_transport(exc=httpx.ConnectError("connection refused")))

        result = await client.invoke("prompt")

        assert isinstance(result.error, BackendTransportError)
        assert "connection refused" in str(result.error)

    async def test_timeout_is_transport_error(self, make_client, make_transport):
        client = make_client(make_transport(exc=httpx.ReadTimeout("timed out")))

        result = await client.invoke("prompt")

        assert result.error.kind == "transport"

    @pytest.mark.parametrize("status_code", [400, 403, 429, 500, 503])
    async def test_http_status_error(self, make_client, make_transport, status_code):
        client = make_client(make_transport(status_code=status_code, json_body={"error": {"message": "x"}}))

        result = await client.invoke("prompt")

        assert isinstance(result.error, BackendHTTPStatusError)
        assert result.error.status_code == status_code

    async def test_reported_error(self, make_client, make_transport):
        body = {"error": {"code": 400, "message": "API key not valid. Please pass a valid API key."}}
        client = make_client(make_transport(json_body=body))

        result = await client.invoke("prompt")

        assert isinstance(result.error, BackendReportedError)
        assert result.error.message == "API key not valid. Please pass a valid API key."

    @pytest.mark.parametrize(
        "body",
        [
            {},
            {"candidates": []},
            {"candidates": [{"content": {"parts": []}}]},
            {"candidates": [{"finishReason": "SAFETY"}]},
            {"candidates": [{"content": {"parts": [{"inlineData": {}}]}}]},
            ["not", "an", "object"],
        ],
    )
    async def test_empty_response(self, make_client, make_transport, body):
        client = make_client(make_transport(json_body=body))

        result = await client.invoke("prompt")

        assert isinstance(result.error, BackendEmptyResponseError)
        assert str(result.error) == "No response generated"

    async def test_undecodable_body(self, make_client, make_transport):
        client = make_client(make_transport(text="<html>gateway</html>"))

        result = await client.invoke("prompt")

        assert result.error.kind == "transport"

    async def test_empty_text_is_success(self, make_client, make_transport, gemini_reply):
        """Blank candidate text is passed through; callers decide what to do."""
        client = make_client(make_transport(json_body=gemini_reply("")))

        result = await client.invoke("prompt")

        assert result.ok
        assert result.text == ""
