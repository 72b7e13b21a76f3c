"""Core utilities: HTTP, URL identifier extraction, HLS parsing and language names."""

from .errors import (
    ApiRequestFailed,
    EmptyVariantUrl,
    ExtractionError,
    ManifestUnparseable,
    NoIdentifierFound,
    ResolutionAborted,
    SessionConfigUnavailable,
)
from .identifier import extract_video_id, get_supported_patterns
from .languages import resolve_audio_language

__all__ = [
    "ApiRequestFailed",
    "EmptyVariantUrl",
    "ExtractionError",
    "ManifestUnparseable",
    "NoIdentifierFound",
    "ResolutionAborted",
    "SessionConfigUnavailable",
    "extract_video_id",
    "get_supported_patterns",
    "resolve_audio_language",
]
