# ABOUTME: HTTP client factory for the Open-Meteo adapter.
# ABOUTME: Builds an httpx.AsyncClient whose transport retries transient failures with tenacity.

import httpx
from pydantic_ai.retries import AsyncTenacityTransport, RetryConfig, wait_retry_after
from tenacity import retry_if_exception_type, stop_after_attempt

from weather_console.config import Settings


def create_http_client(settings: Settings | None = None) -> httpx.AsyncClient:
    """Create an httpx client with tenacity retry on transient HTTP errors.

    Retries connection errors, timeouts, and 429/5xx responses with exponential backoff.
    These retries happen below the coordinators, which count one attempt per user action.
    """
    settings = settings or Settings()
    transport = AsyncTenacityTransport(
        RetryConfig(
            retry=retry_if_exception_type((httpx.ConnectError, httpx.ReadTimeout, httpx.HTTPStatusError)),
            wait=wait_retry_after(max_wait=30),
            stop=stop_after_attempt(settings.http_retries),
            reraise=True,
        ),
        validate_response=lambda r: r.raise_for_status(),
    )
    return httpx.AsyncClient(transport=transport, timeout=settings.http_timeout)
