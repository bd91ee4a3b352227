"""API dependencies."""
import httpx
from fastapi import Depends

from vidextract.core.config import Settings, get_settings
from vidextract.core.http_client import get_client
from vidextract.services.browser_extractor import SimulatedBrowserExtractor
from vidextract.services.download_proxy import DownloadProxy
from vidextract.services.orchestrator import ExtractionOrchestrator
from vidextract.services.static_extractor import StaticFetchExtractor


def get_http_client() -> httpx.AsyncClient:
    return get_client()


def get_orchestrator(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> ExtractionOrchestrator:
    """Build a request-scoped pipeline; nothing in it outlives the request."""
    return ExtractionOrchestrator(
        StaticFetchExtractor(client, settings),
        SimulatedBrowserExtractor(settings),
    )


def get_download_proxy(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> DownloadProxy:
    return DownloadProxy(client, settings)


__all__ = ["get_http_client", "get_orchestrator", "get_download_proxy", "get_settings"]
