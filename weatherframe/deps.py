# ABOUTME: Dependency container for provider calls using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient and settings, and the tenacity retry policy for transient errors.

import httpx
from pydantic import BaseModel, ConfigDict
from tenacity import AsyncRetrying, retry_if_exception, stop_after_attempt, wait_exponential

from weatherframe.config import Settings

MAX_ATTEMPTS = 3
RETRY_WAIT = wait_exponential(multiplier=0.5, max=30)


class ProviderDeps(BaseModel):
    """Dependencies injected into provider and dashboard calls."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings


def create_http_client(timeout: float = 10.0) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=timeout)


def is_transient_error(exc: BaseException) -> bool:
    """Connection errors, read timeouts, and 429/5xx responses are worth retrying."""
    if isinstance(exc, (httpx.ConnectError, httpx.ReadTimeout)):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        return status == 429 or status >= 500
    return False


def create_retrying() -> AsyncRetrying:
    """Retry transient HTTP errors with exponential backoff, re-raising the last error."""
    return AsyncRetrying(
        retry=retry_if_exception(is_transient_error),
        wait=RETRY_WAIT,
        stop=stop_after_attempt(MAX_ATTEMPTS),
        reraise=True,
    )
