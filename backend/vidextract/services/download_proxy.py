"""Download proxy: relay a remote media file to the caller."""
import logging
from typing import AsyncIterator
from urllib.parse import quote, unquote, urlparse

import httpx

from vidextract.core.config import Settings
from vidextract.core.errors import TransportFailure, UpstreamFailure
from vidextract.schemas.extraction import ProxiedStream

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "video.mp4"
DEFAULT_CONTENT_TYPE = "video/mp4"


def filename_from_url(url: str) -> str:
    """Last non-empty path segment, query stripped, safe for an ASCII header value."""
    try:
        path = urlparse(url).path
    except ValueError:
        return DEFAULT_FILENAME
    segments = [segment for segment in path.split("/") if segment]
    if not segments:
        return DEFAULT_FILENAME

    name = segments[-1].replace('"', "").replace("\r", "").replace("\n", "")
    try:
        name.encode("ascii")
    except UnicodeEncodeError:
        name = quote(unquote(name))
    return name or DEFAULT_FILENAME


def get_headers() -> dict:
    """Get headers for upstream requests."""
    return {
        "Accept": "*/*",
        "Accept-Encoding": "identity",
    }


class DownloadProxy:
    """Opens a streamed GET against the origin and hands back its body."""

    chunk_size = 64 * 1024

    def __init__(self, client: httpx.AsyncClient, settings: Settings):
        self.client = client
        self.settings = settings

    async def open(self, media_url: str) -> ProxiedStream:
        headers = get_headers()
        headers["User-Agent"] = self.settings.user_agent
        request = self.client.build_request("GET", media_url, headers=headers)

        try:
            resp = await self.client.send(request, stream=True)
        except httpx.HTTPError as e:
            logger.warning("Download proxy error for %s: %s: %s", media_url, type(e).__name__, e)
            raise TransportFailure("Download proxy error") from e

        if not resp.is_success:
            await resp.aclose()
            logger.info("Upstream refused %s with HTTP %s", media_url, resp.status_code)
            raise UpstreamFailure("Upstream failed", upstream_status=resp.status_code)

        return ProxiedStream(
            body=self._relay(resp, media_url),
            content_type=resp.headers.get("content-type") or DEFAULT_CONTENT_TYPE,
            filename=filename_from_url(media_url),
        )

    async def _relay(self, resp: httpx.Response, media_url: str) -> AsyncIterator[bytes]:
        """Yield the origin body; a mid-stream fault is re-raised so the caller sees a broken download."""
        sent = 0
        try:
            async for chunk in resp.aiter_bytes(self.chunk_size):
                sent += len(chunk)
                yield chunk
        except httpx.HTTPError as e:
            logger.warning("Stream from %s broke after %d bytes: %s", media_url, sent, e)
            raise
        finally:
            await resp.aclose()
            logger.debug("Relayed %d bytes from %s", sent, media_url)
