"""
Tests for application settings.
"""
import pydantic
import pytest

from call_assist.config import API_KEY_PLACEHOLDER, Settings


class TestSettings:
    """Test Settings defaults and validation."""

    def test_defaults(self):
        config = Settings(_env_file=None)

        assert config.api_prefix == "/api/v1"
        assert config.request_min_interval_ms == 1000
        assert config.gemini_temperature == 0.7
        assert config.gemini_top_k == 40
        assert config.gemini_top_p == 0.95
        assert config.gemini_max_output_tokens == 1024
        assert config.gemini_api_url.endswith("gemini-2.0-flash:generateContent")

    @pytest.mark.parametrize(
        "key, configured",
        [
            ("AIzaSyRealKey", True),
            (None, False),
            ("", False),
            ("   ", False),
            (API_KEY_PLACEHOLDER, False),
        ],
    )
    def test_gemini_configured(self, key, configured):
        assert Settings(gemini_api_key=key, _env_file=None).gemini_configured is configured

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env-key-456")
        monkeypatch.setenv("REQUEST_MIN_INTERVAL_MS", "250")

        config = Settings(_env_file=None)

        assert config.gemini_api_key == "env-key-456"
        assert config.request_min_interval_ms == 250

    def test_negative_interval_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(request_min_interval_ms=-1, _env_file=None)

    @pytest.mark.parametrize("field, value", [("gemini_temperature", 2.5), ("gemini_top_p", 1.5)])
    def test_sampling_bounds(self, field, value):
        with pytest.raises(pydantic.ValidationError):
            Settings(**{field: value}, _env_file=None)

    def test_cors_origins_list(self):
        config = Settings(cors_origins=["http://a.test", "http://b.test"], _env_file=None)

        assert config.cors_origins == ["http://a.test", "http://b.test"]
