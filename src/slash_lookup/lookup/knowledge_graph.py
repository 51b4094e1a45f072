"""Knowledge Graph Search API resolver.

Maps a query term to the article URL of the best-matching entity. This is
the only component that retries or applies a timeout; the handler calls it
once per request.
"""

import asyncio
import logging

import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)
from tenacity.wait import wait_base

from slash_lookup.exceptions import LookupFailure
from slash_lookup.lookup.schemas import SearchResponse

logger = logging.getLogger(__name__)

KG_SEARCH_URL = "https://kgsearch.googleapis.com/v1/entities:search"
MAX_ATTEMPTS = 3


def _is_retryable(error: BaseException) -> bool:
    """Transport errors, rate limits (429) and server errors (5xx) are transient."""
    if isinstance(error, httpx.TransportError):
        return True
    if isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        return status == 429 or status >= 500
    return False


class KnowledgeGraphResolver:
    """Async callable ``resolver(term) -> str | None`` backed by kgsearch.

    Returns None when the search completes without a usable match and raises
    LookupFailure when the search itself cannot complete.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        *,
        timeout_seconds: float = 10.0,
        language: str | None = None,
        retry_wait: wait_base | None = None,
    ) -> None:
        self._client = client
        self._api_key = api_key
        self._timeout_seconds = timeout_seconds
        self._language = language
        self._retry_wait = retry_wait or wait_exponential_jitter(initial=0.5, max=4, jitter=1)

    async def __call__(self, term: str) -> str | None:
        if not term.strip():
            return None

        try:
            async with asyncio.timeout(self._timeout_seconds):
                payload = await self._search(term)
            result = SearchResponse.model_validate(payload)
        except TimeoutError as exc:
            raise LookupFailure(
                term, f"Knowledge Graph lookup timed out after {self._timeout_seconds:.1f}s"
            ) from exc
        except httpx.HTTPError as exc:
            raise LookupFailure(term, f"Knowledge Graph request failed: {exc}") from exc
        except ValueError as exc:  # bad JSON or unexpected shape
            raise LookupFailure(term, f"Unreadable Knowledge Graph response: {exc}") from exc

        return result.best_match_url()

    async def _search(self, term: str) -> object:
        """Call entities:search, retrying transient failures."""
        params = {"query": term, "key": self._api_key, "limit": 1}
        if self._language:
            params["languages"] = self._language

        async for attempt in AsyncRetrying(
            retry=retry_if_exception(_is_retryable),
            wait=self._retry_wait,
            stop=stop_after_attempt(MAX_ATTEMPTS),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                response = await self._client.get(KG_SEARCH_URL, params=params)
                response.raise_for_status()
                return response.json()
