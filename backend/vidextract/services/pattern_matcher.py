"""
Media URL pattern matching over arbitrary text.

Finds absolute URLs pointing at video files (``.mp4``) or adaptive streaming
manifests (``.m3u8``) in HTML, inline scripts, JSON blobs and the like.
"""
import re
from typing import Iterable, List

from vidextract.schemas.extraction import MediaKind

# A URL ends at whitespace, a quote, an angle bracket or a backslash
_URL_CHAR = r"""[^"'\s<>\\]"""

# Maximal delimiter-free runs starting at a scheme; no backtracking, so linear
URL_TOKEN_PATTERN = re.compile(rf"https?://{_URL_CHAR}+", re.IGNORECASE)

MEDIA_MARKERS = (".mp4", ".m3u8")


def _has_marker(token: str, marker: str) -> bool:
    """True when ``marker`` follows at least one host character after the scheme."""
    lowered = token.lower()
    host_start = lowered.index("://") + 3
    return lowered.find(marker, host_start + 1) != -1


def unique(items: Iterable[str]) -> List[str]:
    """Deduplicate preserving first occurrence."""
    return list(dict.fromkeys(items))


def find_media_urls(text) -> List[str]:
    """
    Return media URLs found in ``text``.

    ``.mp4`` matches come first, then ``.m3u8`` matches, each in the order they
    appear. Bytes are decoded as UTF-8 with replacement; anything that is not
    text yields an empty list.
    """
    if isinstance(text, (bytes, bytearray)):
        text = bytes(text).decode("utf-8", errors="replace")
    if not isinstance(text, str) or not text:
        return []

    tokens = [m.group(0) for m in URL_TOKEN_PATTERN.finditer(text)]
    mp4s = [t for t in tokens if _has_marker(t, ".mp4")]
    m3u8s = [t for t in tokens if _has_marker(t, ".m3u8")]
    return unique(mp4s + m3u8s)


def is_media_like(url: str) -> bool:
    """Loose substring test used on observed network traffic."""
    return any(marker in url for marker in MEDIA_MARKERS)


def media_kind(url: str) -> MediaKind:
    """Classify a media URL as a stream manifest or a plain video file."""
    if ".m3u8" in url.lower():
        return MediaKind.STREAM_MANIFEST
    return MediaKind.FILE_VIDEO
