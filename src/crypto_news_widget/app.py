from contextlib import asynccontextmanager
from html import escape

from fastapi import FastAPI
from fastapi.responses import HTMLResponse, RedirectResponse
from loguru import logger

from .widget import CryptoWidget

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Crypto News</title>
    <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="bg-gray-900 text-white">
    <header class="relative flex items-center justify-between p-6">
        <h1 class="text-2xl font-bold text-yellow-400">Crypto News</h1>
        <nav class="{nav_classes}">
            <a href="#news">News</a>
            <a href="#coins">Trending</a>
        </nav>
        <form method="post" action="/menu/toggle">
            <button type="submit" class="{button_classes}">&#9776;</button>
        </form>
    </header>
    <main class="max-w-6xl mx-auto p-6 space-y-12">
        <section id="news">
            <h3 class="text-2xl font-bold mb-6">Latest News</h3>
            <div class="{news_classes}">{news}</div>
        </section>
        <section id="coins">
            <h3 class="text-2xl font-bold mb-6">Trending Coins</h3>
            <div class="{coins_classes}">{coins}</div>
        </section>
    </main>
</body>
</html>
"""


def render_page(widget: CryptoWidget) -> str:
    regions = widget.regions
    return PAGE_TEMPLATE.format(
        nav_classes=escape(regions.nav.class_attr) if regions.nav else "hidden",
        button_classes=escape(regions.menu_button.class_attr) if regions.menu_button else "hidden",
        news_classes=escape(regions.news.class_attr),
        news=regions.news.markup,
        coins_classes=escape(regions.coins.class_attr),
        coins=regions.coins.markup,
    )


def create_app(widget: CryptoWidget) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Page ready; starting refresh pipelines…")
        widget.page_ready()
        try:
            yield
        finally:
            await widget.shutdown()

    app = FastAPI(title="Crypto News Widget", lifespan=lifespan)
    app.state.widget = widget

    @app.get("/", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        return HTMLResponse(render_page(widget))

    @app.post(widget.retry_url)
    async def retry_news() -> RedirectResponse:
        logger.info("Manual news retry requested")
        await widget.refresh_news()
        return RedirectResponse("/", status_code=303)

    @app.post("/menu/toggle")
    async def toggle_menu() -> RedirectResponse:
        if widget.regions.menu_button is not None:
            widget.regions.menu_button.dispatch("click")
        return RedirectResponse("/", status_code=303)

    return app
