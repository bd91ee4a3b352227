"""Extraction and download schemas."""
from dataclasses import dataclass
from enum import Enum
from typing import AsyncIterator, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class MediaKind(str, Enum):
    FILE_VIDEO = "FileVideo"
    STREAM_MANIFEST = "StreamManifest"


class ExtractionMethod(str, Enum):
    """Which stage produced the result."""
    STATIC_FETCH = "StaticFetch"
    SIMULATED_BROWSER = "SimulatedBrowser"
    NONE = "None"


class MediaReference(BaseModel):
    """A media URL found on a page. Identity is the URL string."""
    url: str
    kind: MediaKind


class ExtractionResult(BaseModel):
    """Outcome of running the extraction pipeline against one page."""
    model_config = ConfigDict(populate_by_name=True)

    page_url: str = Field(alias="pageUrl")
    media: List[MediaReference] = []
    method: ExtractionMethod = ExtractionMethod.NONE
    note: Optional[str] = None

    @property
    def videos(self) -> List[str]:
        return [ref.url for ref in self.media]


class ExtractResponse(BaseModel):
    """Body returned by ``GET /extract``."""
    model_config = ConfigDict(populate_by_name=True)

    page_url: str = Field(alias="pageUrl")
    videos: List[str] = []
    media: List[MediaReference] = []
    method: ExtractionMethod
    note: Optional[str] = None

    @classmethod
    def from_result(cls, result: ExtractionResult) -> "ExtractResponse":
        return cls(
            page_url=result.page_url,
            videos=result.videos,
            media=result.media,
            method=result.method,
            note=result.note,
        )


class ErrorResponse(BaseModel):
    error: str
    detail: Optional[str] = None


@dataclass
class ProxiedStream:
    """An open origin response ready to be relayed to the caller."""
    body: AsyncIterator[bytes]
    content_type: str
    filename: str
