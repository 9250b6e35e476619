from abc import ABC, abstractmethod
from typing import Any, Dict, List


class BaseNewsProvider(ABC):
    @abstractmethod
    async def fetch_news(self) -> List[Dict[str, Any]]:
        """Return raw news records or raise FetchError."""
        pass
