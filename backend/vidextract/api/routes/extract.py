"""Extraction route."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from vidextract.api.deps import get_orchestrator, get_settings
from vidextract.core.config import Settings
from vidextract.core.validation import validate_url
from vidextract.schemas import ErrorResponse, ExtractResponse
from vidextract.services.orchestrator import ExtractionOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["extract"])


@router.get(
    "/extract",
    response_model=ExtractResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def extract_videos(
    url: Optional[str] = Query(None, description="Product page URL"),
    settings: Settings = Depends(get_settings),
    orchestrator: ExtractionOrchestrator = Depends(get_orchestrator),
):
    """Find video files and stream manifests on a product page."""
    page_url = await validate_url(url, settings.block_private_networks)

    try:
        result = await orchestrator.extract(page_url)
    except Exception as e:
        logger.exception("Extraction failed for %s", page_url)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to extract", "detail": str(e)},
        )

    return ExtractResponse.from_result(result)
