# ABOUTME: Tests for environment-driven settings and the HTTP client factory.
# ABOUTME: Validates defaults, WEATHER_CONSOLE_* overrides, and client construction.

import httpx
import pytest
from pydantic import ValidationError

from weather_console.config import Settings
from weather_console.deps import create_http_client


class TestSettings:
    def test_defaults(self, monkeypatch):
        """Settings fall back to defaults when no variables are set.

        Implementation: Clears every WEATHER_CONSOLE_* variable and builds from env.
        Passing implies: The console starts with Chennai and sane HTTP limits out of the box.
        """
        for name in Settings.model_fields:
            monkeypatch.delenv(f"WEATHER_CONSOLE_{name.upper()}", raising=False)
        settings = Settings.from_env()
        assert settings.default_query == "Chennai"
        assert settings.search_count == 10
        assert settings.http_retries == 3

    def test_env_overrides(self, monkeypatch):
        """WEATHER_CONSOLE_* variables override defaults and are coerced to field types.

        Implementation: Sets string values for a str, int, and float field.
        Passing implies: Environment configuration reaches the console.
        """
        monkeypatch.setenv("WEATHER_CONSOLE_DEFAULT_QUERY", "Vijayawada")
        monkeypatch.setenv("WEATHER_CONSOLE_SEARCH_COUNT", "5")
        monkeypatch.setenv("WEATHER_CONSOLE_HTTP_TIMEOUT", "2.5")
        settings = Settings.from_env()
        assert settings.default_query == "Vijayawada"
        assert settings.search_count == 5
        assert settings.http_timeout == 2.5

    def test_invalid_value_rejected(self, monkeypatch):
        """Out-of-range values fail validation.

        Implementation: Sets a zero search count.
        Passing implies: Misconfiguration is caught at startup.
        """
        monkeypatch.setenv("WEATHER_CONSOLE_SEARCH_COUNT", "0")
        with pytest.raises(ValidationError):
            Settings.from_env()


class TestCreateHttpClient:
    @pytest.mark.asyncio
    async def test_applies_timeout(self):
        """create_http_client configures the request timeout from settings.

        Implementation: Builds a client with a custom timeout and inspects it.
        Passing implies: Settings reach the underlying httpx client.
        """
        client = create_http_client(Settings(http_timeout=4.0))
        try:
            assert isinstance(client, httpx.AsyncClient)
            assert client.timeout.read == 4.0
        finally:
            await client.aclose()
