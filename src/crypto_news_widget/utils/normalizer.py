"""Field probing for the loosely structured news and market payloads.

Every canonical field owns an ordered tuple of accessors. Each accessor takes the
raw record and returns a candidate value or None; the first non-empty candidate
wins, otherwise the field default applies.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from loguru import logger

from ..config.settings import PLACEHOLDER_IMAGE_URL
from ..providers.coin_schemas import CoinItem
from ..providers.news_schemas import NewsItem
from .formatters import parse_timestamp, to_decimal

Accessor = Callable[[Mapping[str, Any]], Any]

MAX_DESCRIPTION_LENGTH = 120
ELLIPSIS = "..."

DEFAULT_TITLE = "Untitled"
DEFAULT_BODY = "No description available."
DEFAULT_URL = "#"
DEFAULT_COIN_NAME = "Unknown"


def key(name: str) -> Accessor:
    def _get(record: Mapping[str, Any]) -> Any:
        value = record.get(name)
        if isinstance(value, str):
            return value if value.strip() else None
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return None
    _get.__name__ = f"key_{name}"
    return _get


def decimal_key(name: str) -> Accessor:
    def _get(record: Mapping[str, Any]) -> Any:
        return to_decimal(record.get(name))
    _get.__name__ = f"decimal_{name}"
    return _get


def unix_seconds_key(name: str) -> Accessor:
    def _get(record: Mapping[str, Any]) -> Optional[datetime]:
        seconds = to_decimal(record.get(name))
        if seconds is None or seconds == 0:
            return None
        try:
            return datetime.fromtimestamp(float(seconds), tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    _get.__name__ = f"unix_{name}"
    return _get


def iso_key(name: str) -> Accessor:
    def _get(record: Mapping[str, Any]) -> Optional[datetime]:
        value = record.get(name)
        return parse_timestamp(value) if isinstance(value, str) else None
    _get.__name__ = f"iso_{name}"
    return _get


NEWS_FIELDS: Dict[str, Sequence[Accessor]] = {
    "image_url": (key("imageurl"), key("image_url"), key("thumbnail")),
    "title": (key("title"),),
    "body": (key("body"), key("description"), key("content")),
    "url": (key("url"), key("guid"), key("link")),
    "published_at": (unix_seconds_key("published_on"), iso_key("publishedAt"), iso_key("createdAt")),
}

NEWS_DEFAULTS: Dict[str, Any] = {
    "image_url": PLACEHOLDER_IMAGE_URL,
    "title": DEFAULT_TITLE,
    "body": DEFAULT_BODY,
    "url": DEFAULT_URL,
    "published_at": None,
}

COIN_FIELDS: Dict[str, Sequence[Accessor]] = {
    "name": (key("name"),),
    "symbol": (key("symbol"),),
    "image_url": (key("image"),),
    "current_price": (decimal_key("current_price"),),
    "price_change_percentage_24h": (
        decimal_key("price_change_percentage_24h"),
        decimal_key("price_change_percentage_24h_in_currency"),
    ),
    "market_cap": (decimal_key("market_cap"),),
}

COIN_DEFAULTS: Dict[str, Any] = {
    "name": DEFAULT_COIN_NAME,
    "symbol": "",
    "image_url": PLACEHOLDER_IMAGE_URL,
    "current_price": 0,
    "price_change_percentage_24h": 0,
    "market_cap": 0,
}


def probe(record: Mapping[str, Any], accessors: Iterable[Accessor], default: Any = None) -> Any:
    for accessor in accessors:
        value = accessor(record)
        if value is not None and value != "":
            return value
    return default


def truncate(text: str, limit: int = MAX_DESCRIPTION_LENGTH) -> str:
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def _probe_all(record: Mapping[str, Any], fields: Dict[str, Sequence[Accessor]], defaults: Dict[str, Any]) -> Dict[str, Any]:
    if not isinstance(record, Mapping):
        record = {}
    return {name: probe(record, accessors, defaults[name]) for name, accessors in fields.items()}


def normalize_news(record: Mapping[str, Any]) -> NewsItem:
    values = _probe_all(record, NEWS_FIELDS, NEWS_DEFAULTS)
    values["body"] = truncate(values["body"])
    return NewsItem(**values)


def normalize_coin(record: Mapping[str, Any]) -> CoinItem:
    return CoinItem(**_probe_all(record, COIN_FIELDS, COIN_DEFAULTS))


def normalize_news_list(records: Iterable[Mapping[str, Any]], limit: Optional[int] = None) -> List[NewsItem]:
    selected = list(records)[:limit] if limit is not None else list(records)
    items = [normalize_news(r) for r in selected]
    logger.debug(f"Normalized {len(items)} news records.")
    return items


def normalize_coin_list(records: Iterable[Mapping[str, Any]]) -> List[CoinItem]:
    items = [normalize_coin(r) for r in records]
    logger.debug(f"Normalized {len(items)} coin records.")
    return items
