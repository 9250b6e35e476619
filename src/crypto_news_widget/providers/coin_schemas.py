from decimal import Decimal

from pydantic import BaseModel


class CoinItem(BaseModel):
    name: str
    symbol: str
    image_url: str
    current_price: Decimal = Decimal(0)
    price_change_percentage_24h: Decimal = Decimal(0)
    market_cap: Decimal = Decimal(0)
