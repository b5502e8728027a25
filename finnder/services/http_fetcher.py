# finnder/services/http_fetcher.py
from typing import Optional

import httpx

from finnder.core.logger import logger


def _decode_body(response: httpx.Response) -> str:
    """
    Body as UTF-8 text; an empty body becomes "" (the "no data" sentinel).
    """
    content = response.content
    if not content:
        return ""
    return content.decode("utf-8-sig", errors="replace")


def fetch_text(url: str, client: Optional[httpx.Client] = None) -> str:
    """
    GET `url` and return the response body as text.

    Non-2xx statuses raise httpx.HTTPStatusError and connectivity problems
    raise httpx.TransportError; neither is handled here.
    """
    if client is None:
        with httpx.Client(follow_redirects=True) as owned_client:
            return fetch_text(url, owned_client)

    response = client.get(url)
    response.raise_for_status()
    text = _decode_body(response)
    logger.debug("GET {} -> {} ({} chars)", response.url.path, response.status_code, len(text))
    return text


async def fetch_text_async(url: str, client: Optional[httpx.AsyncClient] = None) -> str:
    """
    Awaitable counterpart of fetch_text with the same results and errors.
    """
    if client is None:
        async with httpx.AsyncClient(follow_redirects=True) as owned_client:
            return await fetch_text_async(url, owned_client)

    response = await client.get(url)
    response.raise_for_status()
    text = _decode_body(response)
    logger.debug("GET {} -> {} ({} chars)", response.url.path, response.status_code, len(text))
    return text
