"""Base HTTP client for the published JSON datasets."""

import asyncio

import httpx
from loguru import logger
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from settings import API_TIMEOUT, DATA_BASE_URL

_config = {"base_url": DATA_BASE_URL, "timeout": API_TIMEOUT}

RETRY_ATTEMPTS = 3


def set_api_config(base_url: str, timeout: int) -> None:
    """Point the clients at another dataset host, e.g. a local dev server."""
    _config["base_url"] = base_url.rstrip("/")
    _config["timeout"] = timeout


def _is_retryable_error(exc: BaseException) -> bool:
    """Connection problems, timeouts and 5xx responses are worth another attempt."""
    if isinstance(exc, httpx.TransportError):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


def _log_retry(state) -> None:
    logger.warning("Retrying {} (attempt {}): {}", state.args[1], state.attempt_number, state.outcome.exception())


class BaseClient:
    """Async dataset client; at most `max_concurrent` downloads run at once."""

    def __init__(self, max_concurrent: int = 5):
        self._client: httpx.AsyncClient | None = None
        self._sem = asyncio.Semaphore(max_concurrent)
        self._downloads = 0

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            base_url=_config["base_url"],
            timeout=_config["timeout"],
            headers={"Accept": "application/json"},
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, *_):
        logger.debug("{}: {} downloads", self.__class__.__name__, self._downloads)
        if self._client:
            await self._client.aclose()

    @retry(
        stop=stop_after_attempt(RETRY_ATTEMPTS),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception(_is_retryable_error),
        before_sleep=_log_retry,
        reraise=True,
    )
    async def _get(self, filename: str) -> list:
        """Download one dataset file; every dataset is a JSON array."""
        async with self._sem:
            self._downloads += 1
            resp = await self._client.get(f"/{filename}")
            resp.raise_for_status()
            data = resp.json()

        if not isinstance(data, list):
            raise ValueError(f"{filename}: expected a JSON array, got {type(data).__name__}")
        logger.debug("Downloaded {} ({} records)", filename, len(data))
        return data


async def safe_request(coro, default=None):
    """Await coro; log and return default when it fails."""
    try:
        return await coro
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("Request failed: {}", e)
        return default if default is not None else []
