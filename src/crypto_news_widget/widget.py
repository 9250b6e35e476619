import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx
from loguru import logger

from .config.settings import Config
from .providers.base_crypto_provider import BaseCryptoProvider
from .providers.base_news_provider import BaseNewsProvider
from .providers.coingecko_provider import CoinGeckoProvider
from .providers.cryptocompare_provider import CryptoCompareNewsProvider
from .providers.errors import FetchError
from .rendering.regions import PageRegions, Region
from .rendering.renderer import DEFAULT_RETRY_URL, render_coins, render_error, render_loading, render_news
from .scheduler import RefreshScheduler
from .utils.normalizer import normalize_coin_list, normalize_news_list

MENU_TOGGLE_CLASSES = (
    "hidden",
    "flex",
    "flex-col",
    "absolute",
    "top-full",
    "left-0",
    "right-0",
    "bg-gray-900",
    "p-6",
    "space-x-0",
    "space-y-4",
)


@dataclass
class WidgetState:
    """Last successful raw payload per pipeline; each cache is written only by its own pipeline."""

    news_cache: List[Dict[str, Any]] = field(default_factory=list)
    coins_cache: List[Dict[str, Any]] = field(default_factory=list)


class CryptoWidget:
    def __init__(
        self,
        news_provider: BaseNewsProvider,
        coin_provider: BaseCryptoProvider,
        regions: PageRegions,
        *,
        news_limit: int = 6,
        refresh_interval: float = 300.0,
        retry_url: str = DEFAULT_RETRY_URL,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.news_provider = news_provider
        self.coin_provider = coin_provider
        self.regions = regions
        self.state = WidgetState()
        self.news_limit = news_limit
        self.retry_url = retry_url
        self.scheduler = RefreshScheduler([self.refresh_news, self.refresh_coins], interval=refresh_interval)
        self._client = client
        self._menu_wired = False

    @classmethod
    def from_config(cls, config: Config, regions: Optional[PageRegions] = None) -> "CryptoWidget":
        timeout = httpx.Timeout(config.request_timeout)
        client = httpx.AsyncClient(timeout=timeout)
        return cls(
            news_provider=CryptoCompareNewsProvider(client, config.news_api_url),
            coin_provider=CoinGeckoProvider(client, config.coins_api_url),
            regions=regions or PageRegions.default(),
            news_limit=config.news_limit,
            refresh_interval=config.refresh_interval,
            client=client,
        )

    async def refresh_news(self) -> None:
        region = self.regions.news
        region.replace(render_loading())
        try:
            records = await self.news_provider.fetch_news()
            self.state.news_cache = records
            articles = normalize_news_list(records, limit=self.news_limit)
            region.replace(render_news(articles))
            logger.info(f"Rendered {len(articles)} news articles.")
        except FetchError as e:
            logger.error(f"Error fetching crypto news ({e.kind}): {e.message}")
            region.replace(render_error(f"Unable to load news: {e.message}", self.retry_url))
        except Exception as e:
            logger.exception(f"Unexpected error in news pipeline: {e}")
            region.replace(render_error(f"Unable to load news: {e}", self.retry_url))

    async def refresh_coins(self) -> None:
        region = self.regions.coins
        try:
            records = await self.coin_provider.fetch_coins()
            self.state.coins_cache = records
            markup = render_coins(normalize_coin_list(records))
            if markup is None:
                return
            region.replace(markup)
            logger.info(f"Rendered {len(records)} coins.")
        except FetchError as e:
            # Static fallback content stays in place.
            logger.warning(f"Error fetching trending coins ({e.kind}): {e.message}")
        except Exception as e:
            logger.exception(f"Unexpected error in coins pipeline: {e}")

    async def refresh_all(self) -> None:
        await asyncio.gather(self.refresh_news(), self.refresh_coins())

    def toggle_menu(self) -> None:
        if self.regions.nav is not None:
            self.regions.nav.toggle_classes(MENU_TOGGLE_CLASSES)

    def setup_mobile_menu(self) -> bool:
        button: Optional[Region] = self.regions.menu_button
        nav: Optional[Region] = self.regions.nav
        if button is None or nav is None or self._menu_wired:
            return self._menu_wired
        button.add_listener("click", self.toggle_menu)
        self._menu_wired = True
        return True

    def page_ready(self) -> None:
        self.setup_mobile_menu()
        self.scheduler.start()

    async def shutdown(self) -> None:
        await self.scheduler.stop()
        if self._client is not None:
            await self._client.aclose()
