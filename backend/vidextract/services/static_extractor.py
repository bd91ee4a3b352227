"""Static fetch stage: one plain GET, pattern-matched."""
import logging
from typing import List

import httpx

from vidextract.core.config import Settings
from vidextract.core.http_client import browser_headers
from vidextract.services.pattern_matcher import find_media_urls

logger = logging.getLogger(__name__)


class StaticFetchExtractor:
    """Cheap first pass. Advisory: transport failures mean "found nothing"."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings):
        self.client = client
        self.settings = settings

    async def extract(self, page_url: str) -> List[str]:
        try:
            resp = await self.client.get(
                page_url,
                headers=browser_headers(page_url, self.settings.user_agent),
                timeout=self.settings.static_fetch_timeout,
            )
            # Scan whatever came back, regardless of status or content type
            body = resp.text
        except httpx.HTTPError as e:
            logger.info("Static fetch failed for %s: %s: %s", page_url, type(e).__name__, e)
            return []

        urls = find_media_urls(body)
        logger.info("Static fetch of %s (HTTP %s) found %d media URL(s)", page_url, resp.status_code, len(urls))
        return urls
