"""Shared outbound HTTP client."""
from http.cookiejar import CookieJar, DefaultCookiePolicy
from urllib.parse import urlparse

import httpx

from vidextract.core.config import settings

# Persistent HTTP client, bound to application startup/shutdown
_client: httpx.AsyncClient | None = None


def get_client() -> httpx.AsyncClient:
    """Get or create persistent HTTP client with connection pooling."""
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(
            timeout=httpx.Timeout(settings.download_timeout, connect=settings.connect_timeout),
            follow_redirects=True,
            verify=True,
            limits=httpx.Limits(
                max_keepalive_connections=20,
                max_connections=100,
                keepalive_expiry=60.0,
            ),
            http2=True,
            # Requests stay independent: never store or send cookies
            cookies=CookieJar(policy=DefaultCookiePolicy(allowed_domains=[])),
        )
    return _client


async def close_client():
    """Close the persistent HTTP client."""
    global _client
    if _client and not _client.is_closed:
        await _client.aclose()
    _client = None


def browser_headers(page_url: str | None = None, user_agent: str | None = None) -> dict:
    """Headers that make a request look like it came from a desktop browser."""
    headers = {
        "User-Agent": user_agent or settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-GB,en;q=0.9",
    }
    if page_url:
        parsed = urlparse(page_url)
        headers["Referer"] = f"{parsed.scheme}://{parsed.netloc}/"
    return headers
