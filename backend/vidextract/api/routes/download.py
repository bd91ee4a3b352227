"""Download proxy route, streams media to bypass CORS."""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import StreamingResponse

from vidextract.api.deps import get_download_proxy, get_settings
from vidextract.core.config import Settings
from vidextract.core.validation import validate_url
from vidextract.schemas import ErrorResponse
from vidextract.services.download_proxy import DownloadProxy

router = APIRouter(tags=["download"])


@router.get(
    "/download",
    response_class=StreamingResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def download_media(
    url: Optional[str] = Query(None, description="Media URL returned by /extract"),
    settings: Settings = Depends(get_settings),
    proxy: DownloadProxy = Depends(get_download_proxy),
):
    """Relay a media file as an attachment."""
    media_url = await validate_url(url, settings.block_private_networks)
    stream = await proxy.open(media_url)

    return StreamingResponse(
        stream.body,
        media_type=stream.content_type,
        headers={
            "Content-Disposition": f'attachment; filename="{stream.filename}"',
        },
    )
