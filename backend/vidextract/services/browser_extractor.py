"""
Simulated browser stage.

Loads the page in a throwaway headless Chromium, interacts with it the way a
shopper would, and collects media URLs from two independent sources: responses
seen on the network during the session, and the final rendered markup.
"""
import logging
from contextlib import asynccontextmanager
from typing import Callable, List, Optional

from playwright.async_api import Error as PlaywrightError, async_playwright

from vidextract.core.config import Settings
from vidextract.core.errors import ExtractionFailure
from vidextract.services.interaction import DefaultInteractionStrategy, InteractionStrategy
from vidextract.services.pattern_matcher import find_media_urls, is_media_like, unique

logger = logging.getLogger(__name__)

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-blink-features=AutomationControlled",
]

# Runs before any page script
HIDE_WEBDRIVER_SCRIPT = """
Object.defineProperty(navigator, "webdriver", { get: () => false });
"""


class ResponseObserver:
    """Records media-looking response URLs in arrival order."""

    def __init__(self):
        self._urls: dict = {}

    def __call__(self, response) -> None:
        url = response.url
        if is_media_like(url) and url not in self._urls:
            logger.debug("Observed media response: %s", url)
            self._urls[url] = None

    @property
    def urls(self) -> List[str]:
        return list(self._urls)


class SimulatedBrowserExtractor:
    """Expensive second pass. Any failure inside the session means "found nothing"."""

    def __init__(
        self,
        settings: Settings,
        strategy: Optional[InteractionStrategy] = None,
        playwright_factory: Callable = async_playwright,
    ):
        self.settings = settings
        self.strategy = strategy or DefaultInteractionStrategy(settings.scroll_distance)
        self.playwright_factory = playwright_factory

    @asynccontextmanager
    async def session(self):
        """Yield a fresh page; the browser is closed on every exit path."""
        s = self.settings
        async with self.playwright_factory() as playwright:
            browser = await playwright.chromium.launch(headless=s.headless, args=LAUNCH_ARGS)
            try:
                context = await browser.new_context(
                    user_agent=s.user_agent,
                    viewport={"width": s.viewport_width, "height": s.viewport_height},
                    locale=s.locale,
                )
                await context.add_init_script(HIDE_WEBDRIVER_SCRIPT)
                page = await context.new_page()
                yield page
            finally:
                await browser.close()
                logger.debug("Browser session closed")

    async def extract(self, page_url: str) -> List[str]:
        try:
            async with self.session() as page:
                return await self._run(page, page_url)
        except ExtractionFailure as e:
            logger.warning("Browser extraction failed for %s: %s", page_url, e.message)
        except Exception as e:
            logger.warning("Browser extraction failed for %s: %s: %s", page_url, type(e).__name__, e)
        return []

    async def _pause(self, page, seconds: float) -> None:
        await page.wait_for_timeout(seconds * 1000)

    async def _run(self, page, page_url: str) -> List[str]:
        s = self.settings
        observer = ResponseObserver()
        page.on("response", observer)

        try:
            await page.goto(page_url, wait_until="domcontentloaded", timeout=s.navigation_timeout * 1000)
        except PlaywrightError as e:
            raise ExtractionFailure(f"Navigation failed: {e}") from e
        await self._pause(page, s.settle_delay)

        if await self.strategy.select_video_tab(page):
            logger.info("Clicked video tab on %s", page_url)
        await self._pause(page, s.tab_delay)

        for _ in range(s.scroll_steps):
            await self.strategy.scroll(page)
            await self._pause(page, s.scroll_delay)

        if await self.strategy.start_playback(page):
            logger.info("Triggered playback on %s", page_url)
        await self._pause(page, s.final_delay)

        html = await page.content()
        markup_urls = find_media_urls(html)
        urls = unique(observer.urls + markup_urls)
        logger.info(
            "Browser session for %s: %d from network, %d from markup, %d unique",
            page_url, len(observer.urls), len(markup_urls), len(urls),
        )
        return urls
