"""Caller-supplied URL validation."""
import asyncio
import ipaddress
import logging
from urllib.parse import urlparse

from vidextract.core.errors import InvalidInput

logger = logging.getLogger(__name__)

_LOCAL_HOSTNAMES = ("localhost", "127.0.0.1", "::1", "0.0.0.0")


async def validate_url(url: str | None, block_private: bool = False) -> str:
    """
    Validate a caller-supplied URL.
    Returns the URL unchanged or raises InvalidInput.

    With ``block_private`` the host is resolved and loopback, private and
    link-local addresses are refused, so the proxy can't be pointed inward.
    """
    if not url:
        raise InvalidInput("Missing URL")

    try:
        parsed = urlparse(url)
    except ValueError:
        raise InvalidInput("Invalid URL format")

    if parsed.scheme not in ("http", "https"):
        raise InvalidInput("Invalid URL scheme")

    hostname = parsed.hostname
    if not hostname:
        raise InvalidInput("Invalid URL hostname")

    if not block_private:
        return url

    if hostname.lower() in _LOCAL_HOSTNAMES:
        raise InvalidInput("Access to localhost denied")

    try:
        loop = asyncio.get_running_loop()
        addr_info = await loop.getaddrinfo(hostname, None)
    except OSError as e:
        logger.info("DNS resolution failed for %s: %s", hostname, e)
        raise InvalidInput("Invalid hostname or DNS resolution failed")

    for _family, _type, _proto, _canonname, sockaddr in addr_info:
        try:
            ip = ipaddress.ip_address(sockaddr[0])
        except ValueError:
            continue
        if ip.is_private or ip.is_loopback or ip.is_link_local:
            raise InvalidInput("Access to private address denied")

    return url
