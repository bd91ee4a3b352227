"""
Page interaction strategies for the browser stage.

A strategy knows how to coax a product page into requesting its video: open a
"Video" tab, scroll so lazy loaders fire, press play. These are layout
heuristics, so every action is best-effort: it reports success as a bool and
never raises. The browser extractor only logs the outcome.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Sequence

logger = logging.getLogger(__name__)


SELECT_TAB_SCRIPT = """
({selectors, text}) => {
  const lower = (s) => (s || "").trim().toLowerCase();
  const candidates = [...document.querySelectorAll(selectors)];
  const tab = candidates.find((el) => lower(el.textContent) === text);
  if (!tab) return false;
  tab.click();
  return true;
}
"""

START_PLAYBACK_SCRIPT = """
({selectors, keywords, maxClicks}) => {
  const lower = (s) => (s || "").toLowerCase();
  const classOf = (el) => lower(typeof el.className === "string" ? el.className : el.getAttribute("class"));
  const looksPlayable = (el) => keywords.some(
    (k) => lower(el.textContent).includes(k) || classOf(el).includes(k)
  );

  let clicked = 0;
  for (const el of document.querySelectorAll(selectors)) {
    if (clicked >= maxClicks) break;
    if (!looksPlayable(el)) continue;
    try { el.click(); clicked += 1; } catch (e) {}
  }

  let played = 0;
  document.querySelectorAll("video").forEach((v) => {
    try {
      v.muted = true;
      const p = v.play();
      if (p && p.catch) p.catch(() => {});
      played += 1;
    } catch (e) {}
  });
  return {clicked, played};
}
"""


async def best_effort(label: str, action: Awaitable[Any]) -> bool:
    """
    Await ``action`` and report whether it worked.

    Exceptions and an explicit ``False`` result both count as failure. The
    returned flag is informational; callers carry on either way.
    """
    try:
        result = await action
    except Exception as e:
        logger.debug("%s failed: %s: %s", label, type(e).__name__, e)
        return False
    ok = result is not False
    logger.debug("%s: %s", label, "ok" if ok else "nothing to do")
    return ok


class InteractionStrategy(ABC):
    """How to interact with a loaded page to surface its media."""

    @abstractmethod
    async def select_video_tab(self, page) -> bool:
        """Switch the page to its video view, if it has one."""

    @abstractmethod
    async def scroll(self, page) -> bool:
        """Perform one scroll-down gesture."""

    @abstractmethod
    async def start_playback(self, page) -> bool:
        """Press play on whatever looks like a player."""


class DefaultInteractionStrategy(InteractionStrategy):
    """
    Text and class-name heuristics that work on common storefront layouts.

    Play-like candidates are narrowed to buttons and elements whose class or
    aria-label mentions play/video; a generic container whose text merely
    contains "video" is not clicked. At most ``max_play_clicks`` are clicked.
    """

    tab_selectors: Sequence[str] = ('[role="tab"]', "button", "a", "div", "span")
    tab_text: str = "video"
    play_selectors: Sequence[str] = (
        "button",
        '[role="button"]',
        '[aria-label*="play" i]',
        '[class*="play" i]',
        '[class*="video" i]',
    )
    play_keywords: Sequence[str] = ("play", "video")
    max_play_clicks: int = 5

    def __init__(self, scroll_distance: int = 1600):
        self.scroll_distance = scroll_distance

    async def select_video_tab(self, page) -> bool:
        return await best_effort(
            "select video tab",
            page.evaluate(SELECT_TAB_SCRIPT, {
                "selectors": ", ".join(self.tab_selectors),
                "text": self.tab_text,
            }),
        )

    async def scroll(self, page) -> bool:
        return await best_effort("scroll", page.mouse.wheel(0, self.scroll_distance))

    async def start_playback(self, page) -> bool:
        async def _play():
            counts = await page.evaluate(START_PLAYBACK_SCRIPT, {
                "selectors": ", ".join(self.play_selectors),
                "keywords": list(self.play_keywords),
                "maxClicks": self.max_play_clicks,
            })
            logger.debug("Playback triggers: %s", counts)
            return bool(counts and (counts.get("clicked") or counts.get("played")))

        return await best_effort("start playback", _play())
