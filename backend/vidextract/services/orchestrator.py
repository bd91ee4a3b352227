"""Staged extraction: cheap static pass first, browser only when it finds nothing."""
import logging

from vidextract.schemas.extraction import ExtractionMethod, ExtractionResult, MediaReference
from vidextract.services.pattern_matcher import media_kind, unique

logger = logging.getLogger(__name__)

NO_MEDIA_NOTE = (
    "No plaintext media URL was observed; the page likely uses protected "
    "or non-extractable streams."
)


def to_references(urls) -> list[MediaReference]:
    return [MediaReference(url=url, kind=media_kind(url)) for url in unique(urls)]


class ExtractionOrchestrator:
    """
    Runs the extraction stages in order of cost.

    Each stage is any object with ``async extract(page_url) -> list[str]``.
    The first stage to return at least one URL decides the result.
    """

    def __init__(self, static_stage, browser_stage):
        self.static_stage = static_stage
        self.browser_stage = browser_stage

    async def extract(self, page_url: str) -> ExtractionResult:
        urls = await self.static_stage.extract(page_url)
        if urls:
            logger.info("Static fetch succeeded for %s", page_url)
            return ExtractionResult(
                page_url=page_url,
                media=to_references(urls),
                method=ExtractionMethod.STATIC_FETCH,
            )

        logger.info("Static fetch found nothing for %s, escalating to browser", page_url)
        urls = await self.browser_stage.extract(page_url)
        if urls:
            return ExtractionResult(
                page_url=page_url,
                media=to_references(urls),
                method=ExtractionMethod.SIMULATED_BROWSER,
            )

        logger.info("No media found on %s", page_url)
        return ExtractionResult(
            page_url=page_url,
            media=[],
            method=ExtractionMethod.NONE,
            note=NO_MEDIA_NOTE,
        )
