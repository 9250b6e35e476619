import os
from typing import Optional

from dotenv import load_dotenv

NEWS_API_URL = "https://min-api.cryptocompare.com/data/v2/news/?lang=EN"
COINS_API_URL = (
    "https://api.coingecko.com/api/v3/coins/markets"
    "?vs_currency=usd&order=market_cap_desc&per_page=4&page=1"
    "&sparkline=false&price_change_percentage=24h"
)
PLACEHOLDER_IMAGE_URL = (
    "https://images.unsplash.com/photo-1621416878681-5a6cdbd8a5cc"
    "?auto=format&fit=crop&w=800&q=80"
)


class Config:
    """Loads configuration for the widget, falling back to the public endpoints."""

    def __init__(self) -> None:
        load_dotenv()

        self.news_api_url: str = os.getenv("NEWS_API_URL", NEWS_API_URL)
        self.coins_api_url: str = os.getenv("COINS_API_URL", COINS_API_URL)

        self.refresh_interval: float = self._get_float_env("REFRESH_INTERVAL_SECONDS", 300.0)
        if self.refresh_interval <= 0:
            raise ValueError("Error: Environment variable 'REFRESH_INTERVAL_SECONDS' must be positive.")
        self.news_limit: int = int(self._get_float_env("NEWS_LIMIT", 6))
        if self.news_limit < 1:
            raise ValueError("Error: Environment variable 'NEWS_LIMIT' must be at least 1.")

        timeout = self._get_float_env("REQUEST_TIMEOUT", 0.0)
        self.request_timeout: Optional[float] = timeout if timeout > 0 else None

        self.log_level: str = os.getenv("LOG_LEVEL", "DEBUG").upper()
        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: int = int(self._get_float_env("PORT", 8000))

    def _get_float_env(self, var_name: str, default: float) -> float:
        value = os.getenv(var_name)
        if value is None or value == "":
            return default
        try:
            return float(value)
        except ValueError:
            raise ValueError(f"Error: Environment variable '{var_name}' must be numeric, got '{value}'.")


config = Config()
