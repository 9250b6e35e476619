from abc import ABC, abstractmethod
from typing import Any, Dict, List


class BaseCryptoProvider(ABC):
    @abstractmethod
    async def fetch_coins(self) -> List[Dict[str, Any]]:
        """Return raw market records or raise FetchError."""
        pass
