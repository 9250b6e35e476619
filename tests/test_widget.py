import asyncio

import httpx

from crypto_news_widget.providers.base_crypto_provider import BaseCryptoProvider
from crypto_news_widget.providers.base_news_provider import BaseNewsProvider
from crypto_news_widget.providers.coingecko_provider import CoinGeckoProvider
from crypto_news_widget.providers.cryptocompare_provider import CryptoCompareNewsProvider
from crypto_news_widget.providers.errors import FetchError
from crypto_news_widget.rendering.regions import PageRegions, Region
from crypto_news_widget.widget import MENU_TOGGLE_CLASSES, CryptoWidget

from helpers import COINS_URL, NEWS_URL, json_response, mock_client

STATIC_COINS = '<div class="static">Bitcoin (BTC)</div>'


class StubNews(BaseNewsProvider):
    def __init__(self, result=None, error=None):
        self.result = result or []
        self.error = error
        self.calls = 0

    async def fetch_news(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.result


class StubCoins(BaseCryptoProvider):
    def __init__(self, result=None, error=None):
        self.result = result or []
        self.error = error
        self.calls = 0

    async def fetch_coins(self):
        self.calls += 1
        if self.error:
            raise self.error
        return self.result


def make_widget(news=None, coins=None):
    return CryptoWidget(
        news or StubNews(result=[{"title": "t"}]),
        coins or StubCoins(result=[{"name": "Bitcoin", "symbol": "btc"}]),
        PageRegions.default(coins_fallback=STATIC_COINS),
    )


def test_news_pipeline_renders_first_six(raw_article):
    records = [dict(raw_article, title=f"Story {i}") for i in range(9)]
    widget = make_widget(news=StubNews(result=records))
    asyncio.run(widget.refresh_news())
    markup = widget.regions.news.markup
    assert markup.count("<article") == 6
    assert "Story 5" in markup and "Story 6" not in markup
    assert widget.state.news_cache == records


def test_news_shows_spinner_while_fetching():
    seen = []
    widget = None

    class PeekingNews(BaseNewsProvider):
        async def fetch_news(self):
            seen.append(widget.regions.news.markup)
            return [{"title": "t"}]

    widget = make_widget(news=PeekingNews())
    asyncio.run(widget.refresh_news())
    assert "animate-spin" in seen[0]
    assert "animate-spin" not in widget.regions.news.markup


def test_empty_news_fetch_renders_error_panel():
    provider = CryptoCompareNewsProvider(mock_client(json_response({"Data": []})), NEWS_URL)
    widget = make_widget(news=provider)
    asyncio.run(widget.refresh_news())
    markup = widget.regions.news.markup
    assert "Unable to load news: No articles found" in markup
    assert 'action="/news/retry"' in markup
    assert widget.state.news_cache == []


def test_news_http_failure_renders_reason():
    widget = make_widget(news=StubNews(error=FetchError.http_status(500)))
    asyncio.run(widget.refresh_news())
    assert "HTTP error! status: 500" in widget.regions.news.markup


def test_news_unexpected_error_still_renders_panel():
    widget = make_widget(news=StubNews(error=RuntimeError("boom")))
    asyncio.run(widget.refresh_news())
    assert "Unable to load news: boom" in widget.regions.news.markup


def test_news_failure_keeps_previous_cache():
    news = StubNews(result=[{"title": "first"}])
    widget = make_widget(news=news)
    asyncio.run(widget.refresh_news())
    news.error = FetchError.empty("No articles found")
    asyncio.run(widget.refresh_news())
    assert widget.state.news_cache == [{"title": "first"}]


def test_retry_refetches_after_error():
    news = StubNews(error=FetchError.empty("No articles found"))
    widget = make_widget(news=news)
    asyncio.run(widget.refresh_news())
    news.error = None
    news.result = [{"title": "Back online"}]
    asyncio.run(widget.refresh_news())
    assert news.calls == 2
    assert "Back online" in widget.regions.news.markup


def test_coins_pipeline_replaces_region(raw_coin):
    widget = make_widget(coins=StubCoins(result=[raw_coin]))
    asyncio.run(widget.refresh_coins())
    assert "Bitcoin (BTC)" in widget.regions.coins.markup
    assert "static" not in widget.regions.coins.markup
    assert widget.state.coins_cache == [raw_coin]


def test_coin_fetch_failure_leaves_region_byte_identical():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("unreachable", request=request)

    widget = make_widget(coins=CoinGeckoProvider(mock_client(handler), COINS_URL))
    before = widget.regions.coins.markup
    asyncio.run(widget.refresh_coins())
    assert widget.regions.coins.markup == before
    assert widget.state.coins_cache == []


def test_coin_failures_of_every_kind_are_silent():
    for error in (FetchError.http_status(429), FetchError.empty("No coins found"), ValueError("bad")):
        widget = make_widget(coins=StubCoins(error=error))
        before = widget.regions.coins.markup
        asyncio.run(widget.refresh_coins())
        assert widget.regions.coins.markup == before


def test_refresh_all_runs_both_pipelines(raw_coin):
    news, coins = StubNews(result=[{"title": "t"}]), StubCoins(result=[raw_coin])
    widget = make_widget(news=news, coins=coins)
    asyncio.run(widget.refresh_all())
    assert (news.calls, coins.calls) == (1, 1)


def test_mobile_menu_click_toggles_nav_classes():
    widget = make_widget()
    nav = widget.regions.nav
    original = set(nav.classes)
    assert widget.setup_mobile_menu()
    widget.regions.menu_button.dispatch("click")
    assert "hidden" not in nav.classes
    assert {"flex", "flex-col", "absolute", "space-y-4"} <= set(nav.classes)
    widget.regions.menu_button.dispatch("click")
    assert set(nav.classes) == original


def test_mobile_menu_is_wired_once():
    widget = make_widget()
    widget.setup_mobile_menu()
    widget.setup_mobile_menu()
    assert widget.regions.menu_button.dispatch("click") == 1


def test_mobile_menu_needs_both_regions():
    widget = CryptoWidget(StubNews(), StubCoins(), PageRegions(news=Region("news"), coins=Region("coins")))
    assert widget.setup_mobile_menu() is False
    assert len(MENU_TOGGLE_CLASSES) == 11


def test_page_ready_fires_both_pipelines_immediately(raw_coin):
    news, coins = StubNews(result=[{"title": "t"}]), StubCoins(result=[raw_coin])
    widget = make_widget(news=news, coins=coins)

    async def scenario():
        widget.page_ready()
        for _ in range(5):
            await asyncio.sleep(0)
        await widget.shutdown()

    asyncio.run(scenario())
    assert (news.calls, coins.calls) == (1, 1)
    assert widget.scheduler.ticks == 1


def test_state_holds_the_only_copy_of_fetched_payloads(raw_coin):
    provider = CoinGeckoProvider(mock_client(json_response([raw_coin])), COINS_URL)
    widget = make_widget(coins=provider)
    asyncio.run(widget.refresh_coins())
    assert widget.state.coins_cache == [raw_coin]
    assert not any(isinstance(v, list) for v in vars(provider).values())
