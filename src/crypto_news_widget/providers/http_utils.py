from typing import Any
from urllib.parse import urlparse

import httpx
from loguru import logger

from .errors import FetchError


async def get_json(client: httpx.AsyncClient, url: str, *, source: str) -> Any:
    """Issue one GET and decode the JSON body, mapping every failure onto FetchError."""
    path = urlparse(url).path or url
    try:
        resp = await client.get(url)
    except httpx.HTTPError as exc:
        logger.debug("{} request to {} failed: {!r}", source, path, exc)
        raise FetchError.network(exc) from exc

    logger.info(f"GET {path} -> {resp.status_code}")
    if not resp.is_success:
        raise FetchError.http_status(resp.status_code)

    try:
        return resp.json()
    except ValueError as exc:
        raise FetchError(FetchError.INVALID_BODY, f"Invalid JSON from {source}") from exc
