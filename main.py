import os
import sys

import uvicorn

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "src")))

from crypto_news_widget.app import create_app
from crypto_news_widget.config.settings import config
from crypto_news_widget.rendering.regions import PageRegions
from crypto_news_widget.widget import CryptoWidget
from crypto_news_widget.utils.logger import setup_logger

STATIC_COINS_FALLBACK = """
            <div class="bg-gray-800 p-5 rounded-2xl">
                <h4 class="text-lg font-semibold">Bitcoin (BTC)</h4>
                <p class="text-gray-400">Price: loading…</p>
            </div>
            <div class="bg-gray-800 p-5 rounded-2xl">
                <h4 class="text-lg font-semibold">Ethereum (ETH)</h4>
                <p class="text-gray-400">Price: loading…</p>
            </div>
"""


if __name__ == "__main__":
    logger = setup_logger(config.log_level)
    logger.info("Initializing Crypto News Widget…")

    widget = CryptoWidget.from_config(config, PageRegions.default(coins_fallback=STATIC_COINS_FALLBACK))
    app = create_app(widget)

    logger.info(f"Serving on http://{config.host}:{config.port}")
    uvicorn.run(app, host=config.host, port=config.port)
