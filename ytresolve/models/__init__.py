from .enums import ClientName, Host, LinkType, SessionPolicy
from .innertube import (
    CaptionTrack,
    ClientProfile,
    Format,
    PlayerResponse,
    SessionConfig,
    StreamingData,
)
from .request import ResolveRequest
from .response import ErrorResponse, ExtractorLink, ResolveResponse, SubtitleFile

__all__ = [
    "CaptionTrack",
    "ClientName",
    "ClientProfile",
    "ErrorResponse",
    "ExtractorLink",
    "Format",
    "Host",
    "LinkType",
    "PlayerResponse",
    "ResolveRequest",
    "ResolveResponse",
    "SessionConfig",
    "SessionPolicy",
    "StreamingData",
    "SubtitleFile",
]
