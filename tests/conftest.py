"""
Pytest configuration and fixtures for the Collections Call-Assist Service.
"""
import json
from typing import Callable, Generator, List

import httpx
import pytest
from fastapi.testclient import TestClient

from call_assist.config import Settings, settings
from call_assist.core.dependencies import get_account_repository, get_gemini_client
from call_assist.core.throttle import RequestThrottle
from call_assist.main import app
from call_assist.models.customer import CustomerRecord
from call_assist.services.gemini_client import GeminiClient


def _gemini_reply(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


@pytest.fixture
def gemini_reply() -> Callable[[str], dict]:
    """Builder for a successful generateContent body with a single candidate."""
    return _gemini_reply


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a usable Gemini key and no throttle delay."""
    return Settings(
        gemini_api_key="test-gemini-key-123",
        gemini_api_url="https://gemini.test/v1beta/models/gemini-2.0-flash:generateContent",
        request_min_interval_ms=0,
        _env_file=None,
    )


@pytest.fixture
def unconfigured_settings() -> Settings:
    """Settings with the placeholder key."""
    return Settings(
        gemini_api_key="your_gemini_api_key_here",
        request_min_interval_ms=0,
        _env_file=None,
    )


@pytest.fixture
def make_transport() -> Callable[..., RecordingTransport]:
    """Factory for recording transports answering with a fixed response."""

    def _make(status_code: int = 200, json_body=None, text: str = None, exc: Exception = None):
        def handler(request: httpx.Request) -> httpx.Response:
            if exc is not None:
                raise exc
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json_body if json_body is not None else {})

        return RecordingTransport(handler)

    return _make


@pytest.fixture
def make_client(test_settings) -> Callable[..., GeminiClient]:
    """Factory for Gemini clients bound to a transport."""

    def _make(transport: httpx.AsyncBaseTransport = None, client_settings: Settings = None) -> GeminiClient:
        return GeminiClient(
            settings=client_settings or test_settings,
            throttle=RequestThrottle(min_interval_seconds=0),
            transport=transport,
        )

    return _make


@pytest.fixture
def cafe_delicious() -> CustomerRecord:
    """Low-risk account with no other loans."""
    return CustomerRecord(
        customer_id="C005",
        business_name="Cafe Delicious",
        contact="+61 444 567 890",
        loan_product="Invoice Finance",
        loan_id="L005-01",
        amount_due=3400,
        due_date="2025-09-30",
        days_overdue=6,
        risk_level="Low",
        other_active_loans=[],
        last_payment_date="2025-09-10",
        history=[
            {"date": "2025-08-10", "amount": 1700, "status": "Paid"},
            {"date": "2025-09-10", "amount": 1700, "status": "Paid"},
            {"date": "2025-09-30", "amount": 1700, "status": "Missed"},
        ],
    )


@pytest.fixture
def techstart() -> CustomerRecord:
    """High-risk account with two other active loans."""
    return CustomerRecord.model_validate({
        "customerId": "C004",
        "businessName": "TechStart Solutions",
        "contact": "+61 433 456 789",
        "loanProduct": "Business Cash Advance",
        "loanId": "L004-01",
        "amountDue": 18900,
        "dueDate": "2025-09-10",
        "daysOverdue": 26,
        "riskLevel": "High",
        "otherActiveLoans": [
            {"loanId": "L004-02", "product": "Invoice Finance", "balance": 12000, "termRemaining": "4 months"},
            {"loanId": "L004-03", "product": "Equipment Finance", "balance": 8500, "termRemaining": "12 months"},
        ],
        "lastPaymentDate": "2025-06-20",
        "history": [
            {"date": "2025-06-20", "amount": 4500, "status": "Paid"},
            {"date": "2025-07-20", "amount": 4500, "status": "Missed"},
            {"date": "2025-08-20", "amount": 4500, "status": "Missed"},
        ],
    })


@pytest.fixture
def api_prefix() -> str:
    """Get the API prefix from settings."""
    return settings.api_prefix


@pytest.fixture
def sample_headers() -> dict:
    """Sample request headers with correlation ID."""
    return {
        "X-Correlation-ID": "test-correlation-123",
        "Content-Type": "application/json",
    }


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """
    Create a test client for the FastAPI application.

    The Gemini client is replaced by an unconfigured one so no test reaches
    the network; tests that need a backend override it again.
    """
    unconfigured = GeminiClient(
        settings=Settings(gemini_api_key=None, _env_file=None),
        throttle=RequestThrottle(min_interval_seconds=0),
    )
    app.dependency_overrides[get_gemini_client] = lambda: unconfigured
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    get_account_repository.cache_clear()
