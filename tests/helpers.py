import json
from typing import Any, Callable

import httpx

NEWS_URL = "https://news.test/data/v2/news/?lang=EN"
COINS_URL = "https://markets.test/api/v3/coins/markets?vs_currency=usd"


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def json_response(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(payload), headers={"content-type": "application/json"})
    return _handler
