"""Markup builders for the news and coin grids.

All functions are pure: they return strings and leave it to the caller to put
them into a region. Interpolated values are HTML-escaped.
"""

from datetime import datetime
from decimal import Decimal
from html import escape
from typing import Optional, Sequence

from ..config.settings import PLACEHOLDER_IMAGE_URL
from ..providers.coin_schemas import CoinItem
from ..providers.news_schemas import NewsItem
from ..utils.formatters import format_date, format_large_number, format_price

NO_NEWS_MESSAGE = "No news available at the moment."
DEFAULT_RETRY_URL = "/news/retry"


def render_news_card(article: NewsItem, now: Optional[datetime] = None) -> str:
    title = escape(article.title)
    placeholder = escape(PLACEHOLDER_IMAGE_URL)
    return f"""
            <article class="bg-gray-800 rounded-2xl overflow-hidden hover:shadow-lg hover:shadow-yellow-400/20 transition transform hover:-translate-y-1 flex flex-col h-full">
                <img src="{escape(article.image_url)}"
                     alt="{title}"
                     class="w-full h-48 object-cover"
                     onerror="this.onerror=null;this.src='{placeholder}'" />
                <div class="p-5 flex flex-col flex-grow">
                    <h4 class="text-xl font-semibold mb-2 line-clamp-2">
                        {title}
                    </h4>
                    <p class="text-gray-400 text-sm mb-3 line-clamp-3 flex-grow">
                        {escape(article.body)}
                    </p>
                    <div class="flex items-center justify-between mt-auto">
                        <a href="{escape(article.url)}"
                           target="_blank"
                           rel="noopener noreferrer"
                           class="text-yellow-400 font-medium hover:underline">
                            Read More &rarr;
                        </a>
                        <span class="text-xs text-gray-500">
                            {escape(format_date(article.published_at, now=now))}
                        </span>
                    </div>
                </div>
            </article>
        """


def render_news(articles: Sequence[NewsItem], now: Optional[datetime] = None) -> str:
    if not articles:
        return f'<p class="text-gray-400 col-span-3">{NO_NEWS_MESSAGE}</p>'
    return "".join(render_news_card(article, now=now) for article in articles)


def format_change(change: Decimal) -> str:
    if change == 0:
        change = abs(change)
    sign = "+" if change >= 0 else ""
    return f"{sign}{change:.2f}%"


def render_coin_card(coin: CoinItem) -> str:
    change = coin.price_change_percentage_24h
    color = "text-green-400" if change >= 0 else "text-red-400"
    name = escape(coin.name)
    return f"""
            <div class="bg-gray-800 p-5 rounded-2xl hover:shadow-lg hover:shadow-yellow-400/20 transition transform hover:-translate-y-1 cursor-pointer">
                <div class="flex items-center gap-2 mb-2">
                    <img src="{escape(coin.image_url)}" alt="{name}" class="w-8 h-8" />
                    <h4 class="text-lg font-semibold">{name} ({escape(coin.symbol.upper())})</h4>
                </div>
                <p class="text-gray-400">Price: ${format_price(coin.current_price)}</p>
                <p class="{color}">
                    {format_change(change)}
                </p>
                <p class="text-xs text-gray-500 mt-1">
                    Cap: ${format_large_number(coin.market_cap)}
                </p>
            </div>
        """


def render_coins(coins: Sequence[CoinItem]) -> Optional[str]:
    """Markup for the coin grid, or None when there is nothing to show."""
    if not coins:
        return None
    return "".join(render_coin_card(coin) for coin in coins)


def render_loading() -> str:
    return """
        <div class="col-span-3 flex items-center justify-center py-12">
            <div class="animate-spin rounded-full h-12 w-12 border-b-2 border-yellow-400"></div>
        </div>
    """


def render_error(message: str, retry_url: str = DEFAULT_RETRY_URL) -> str:
    return f"""
        <div class="col-span-3 bg-red-900/20 border border-red-500 rounded-lg p-6 text-center">
            <p class="text-red-400">{escape(message)}</p>
            <form method="post" action="{escape(retry_url)}">
                <button type="submit" class="mt-4 bg-yellow-400 text-gray-900 px-4 py-2 rounded-lg hover:bg-yellow-500 transition">
                    Retry
                </button>
            </form>
        </div>
    """
