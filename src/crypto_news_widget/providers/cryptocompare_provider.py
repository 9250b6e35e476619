from typing import Any, Dict, List

import httpx
from loguru import logger

from .base_news_provider import BaseNewsProvider
from .errors import FetchError
from .http_utils import get_json


class CryptoCompareNewsProvider(BaseNewsProvider):
    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self._url = url

    async def fetch_news(self) -> List[Dict[str, Any]]:
        raw = await get_json(self._client, self._url, source="CryptoCompare")
        logger.debug("CryptoCompare response: {}", raw)

        # Articles live under "Data"; anything else counts as no articles.
        records = raw.get("Data") if isinstance(raw, dict) else None
        articles = [r for r in records if isinstance(r, dict)] if isinstance(records, list) else []
        if not articles:
            raise FetchError.empty("No articles found")
        return articles
