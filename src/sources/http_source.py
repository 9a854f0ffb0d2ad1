# src/sources/http_source.py

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from src.config.settings import settings
from src.models.enums import SourceKind
from .base_source import BaseSource, DataSourceError, SourceNotFoundError

# Define common HTTP status codes that warrant a retry
RETRYABLE_STATUS_CODES = {408, 429, 500, 502, 503, 504}


class RetryableStatusError(DataSourceError):
    """Exception raised for transient HTTP statuses (timeouts, rate limits, 5xx)."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class HttpSource(BaseSource):
    """Fetches a league document over HTTP(S), bypassing caches."""

    kind: SourceKind = SourceKind.HTTP

    def __init__(
        self,
        location: str,
        client: Optional[httpx.AsyncClient] = None,
        attempts: Optional[int] = None,
        wait: Optional[wait_base] = None,
    ):
        super().__init__(location)
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(settings.http_timeout_seconds),
            follow_redirects=True,
        )
        self.attempts = attempts or settings.fetch_attempts
        self.wait = wait or wait_exponential(multiplier=1, min=1, max=10)

    async def _request(self) -> httpx.Response:
        logger.debug(f"Requesting {self.location}")
        response = await self.client.get(
            self.location, headers={"Cache-Control": "no-store"}
        )

        if response.status_code == 404:
            raise SourceNotFoundError(f"Failed to load {self.location}: 404")

        if response.status_code in RETRYABLE_STATUS_CODES:
            logger.warning(
                f"Transient status {response.status_code} from {self.location}, will retry"
            )
            raise RetryableStatusError(
                f"Failed to load {self.location}: {response.status_code}",
                response.status_code,
            )

        if response.is_error:
            raise DataSourceError(
                f"Failed to load {self.location}: {response.status_code}"
            )

        return response

    async def fetch_text(self) -> str:
        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.attempts),
                wait=self.wait,
                retry=retry_if_exception_type((httpx.RequestError, RetryableStatusError)),
                reraise=True,
            ):
                with attempt:
                    response = await self._request()
        except httpx.RequestError as e:
            logger.error(
                f"Giving up on {self.location} after {self.attempts} attempt(s): {e}"
            )
            raise DataSourceError(f"Failed to load {self.location}: {e}") from e
        except RetryableStatusError:
            logger.error(f"Giving up on {self.location} after {self.attempts} attempt(s)")
            raise

        logger.debug(f"Request successful: {response.status_code} for {self.location}")
        return response.text

    async def close(self) -> None:
        """Closes the underlying HTTP client if this source created it."""
        if self._owns_client:
            await self.client.aclose()
            logger.debug(f"Closed HTTP client for {self.location}")
