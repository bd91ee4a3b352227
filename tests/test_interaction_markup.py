"""Default interaction heuristics run in a real headless Chromium against fixed markup."""
import asyncio

import pytest
from playwright.async_api import Error as PlaywrightError, async_playwright

from vidextract.services.interaction import START_PLAYBACK_SCRIPT, DefaultInteractionStrategy

PRODUCT_MARKUP = """
<html><body>
  <span onclick="window.clicks.push('reviews')">Video reviews</span>
  <div role="tab" onclick="window.clicks.push('tab')">  Video  </div>
  <button class="play-btn" onclick="window.clicks.push('play')">Play</button>
  <video id="hero"></video>
  <script>window.clicks = [];</script>
</body></html>
"""

MANY_PLAY_BUTTONS = "<html><body>" + "".join(
    f'<button class="play" onclick="window.n = (window.n || 0) + 1">Play {i}</button>' for i in range(8)
) + "</body></html>"


def with_page(markup, scenario):
    async def go():
        async with async_playwright() as playwright:
            try:
                browser = await playwright.chromium.launch(headless=True, args=["--no-sandbox"])
            except PlaywrightError as e:
                pytest.skip(f"Chromium not available: {e}")
            try:
                page = await browser.new_page()
                await page.set_content(markup)
                return await scenario(page)
            finally:
                await browser.close()

    return asyncio.run(go())


def test_video_tab_matched_on_exact_trimmed_text():
    strategy = DefaultInteractionStrategy()

    async def scenario(page):
        found = await strategy.select_video_tab(page)
        return found, await page.evaluate("window.clicks")

    found, clicks = with_page(PRODUCT_MARKUP, scenario)

    assert found is True
    assert clicks == ["tab"]


def test_playback_mutes_video_and_clicks_play_button():
    strategy = DefaultInteractionStrategy()

    async def scenario(page):
        counts = await page.evaluate(START_PLAYBACK_SCRIPT, {
            "selectors": ", ".join(strategy.play_selectors),
            "keywords": list(strategy.play_keywords),
            "maxClicks": strategy.max_play_clicks,
        })
        muted = await page.evaluate("document.getElementById('hero').muted")
        return counts, muted, await page.evaluate("window.clicks")

    counts, muted, clicks = with_page(PRODUCT_MARKUP, scenario)

    assert counts == {"clicked": 1, "played": 1}
    assert muted is True
    assert clicks == ["play"]


def test_start_playback_reports_success():
    assert with_page(PRODUCT_MARKUP, DefaultInteractionStrategy().start_playback) is True


def test_play_clicks_are_capped():
    strategy = DefaultInteractionStrategy()

    async def scenario(page):
        await strategy.start_playback(page)
        return await page.evaluate("window.n")

    assert with_page(MANY_PLAY_BUTTONS, scenario) == strategy.max_play_clicks


def test_page_without_tab_or_player():
    strategy = DefaultInteractionStrategy()

    async def scenario(page):
        return await strategy.select_video_tab(page), await strategy.start_playback(page)

    assert with_page("<html><body><p>Linen shirt</p></body></html>", scenario) == (False, False)
