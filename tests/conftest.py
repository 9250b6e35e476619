import pytest


@pytest.fixture
def raw_article():
    return {
        "id": "1",
        "title": "Bitcoin breaks resistance",
        "body": "Markets rallied overnight as buyers returned.",
        "url": "https://example.com/btc",
        "imageurl": "https://images.example.com/btc.png",
        "published_on": 1700000000,
    }


@pytest.fixture
def raw_coin():
    return {
        "id": "bitcoin",
        "name": "Bitcoin",
        "symbol": "btc",
        "image": "https://images.example.com/bitcoin.png",
        "current_price": 67123.456,
        "price_change_percentage_24h": -1.2345,
        "market_cap": 1320000000000,
    }
