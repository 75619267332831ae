"""Single-shot async retrieval of CSV text over HTTP(S)."""
from __future__ import annotations

import logging

import httpx

from csvq.config import settings
from csvq.domain.exceptions import RetrievalError

logger = logging.getLogger(__name__)


async def fetch_csv_text(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = None,
) -> str:
    """GET *url* once and return the decoded body.

    An injected *client* is used as-is and left open; otherwise a client is
    created for this call only.  No retries.
    """
    if client is not None:
        return await _get(client, url)

    async with httpx.AsyncClient(
        timeout=timeout if timeout is not None else settings.HTTP_TIMEOUT,
        follow_redirects=True,
    ) as owned:
        return await _get(owned, url)


async def _get(client: httpx.AsyncClient, url: str) -> str:
    try:
        resp = await client.get(url)
    except (httpx.RequestError, httpx.InvalidURL) as e:
        raise RetrievalError(f"Failed to fetch CSV: {e}") from e

    if not resp.is_success:
        raise RetrievalError(
            f"Failed to fetch CSV: {resp.status_code} {resp.reason_phrase}",
            status_code=resp.status_code,
            reason=resp.reason_phrase,
        )
    logger.debug("Fetched %d bytes from %s", len(resp.content), url)
    return resp.text
