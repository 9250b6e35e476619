from typing import Any, Dict, List

import httpx
from loguru import logger

from .base_crypto_provider import BaseCryptoProvider
from .errors import FetchError
from .http_utils import get_json


class CoinGeckoProvider(BaseCryptoProvider):
    def __init__(self, client: httpx.AsyncClient, url: str) -> None:
        self._client = client
        self._url = url

    async def fetch_coins(self) -> List[Dict[str, Any]]:
        raw = await get_json(self._client, self._url, source="CoinGecko")
        coins = [item for item in raw if isinstance(item, dict)] if isinstance(raw, list) else []
        if not coins:
            raise FetchError.empty("No coins found")

        logger.debug(f"CoinGecko returned {len(coins)} market entries.")
        return coins
