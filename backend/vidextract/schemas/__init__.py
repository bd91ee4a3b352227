"""Pydantic schemas."""
from vidextract.schemas.extraction import (
    ErrorResponse,
    ExtractionMethod,
    ExtractionResult,
    ExtractResponse,
    MediaKind,
    MediaReference,
    ProxiedStream,
)

__all__ = [
    "ErrorResponse",
    "ExtractionMethod",
    "ExtractionResult",
    "ExtractResponse",
    "MediaKind",
    "MediaReference",
    "ProxiedStream",
]
