"""Models for the InnerTube player API: client identity, page config and player response."""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..utils.helpers import int_or_none, str_or_none, traverse_obj
from .enums import ClientName, SessionPolicy

logger = logging.getLogger(__name__)


class ClientProfile(BaseModel):
    """Request identity of one official client application."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Profile name used in requests and settings")
    client_name: ClientName
    client_version: str
    context_client_name: int = Field(..., description="Numeric X-YouTube-Client-Name")
    user_agent: str
    extra_headers: dict[str, str] = Field(default_factory=dict)
    requires_session_config: bool = False
    on_missing_config: SessionPolicy = SessionPolicy.ABORT
    api_key: str | None = Field(None, description="Key used when no page config supplies one")
    android_sdk_version: int | None = None
    os_version: str | None = None
    platform: str | None = None

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, **self.extra_headers}


class SessionConfig(BaseModel):
    """The subset of the watch page's ytcfg blob the player request needs."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    api_key: str = Field(..., alias="INNERTUBE_API_KEY", min_length=1)
    client_version: str | None = Field(None, alias="INNERTUBE_CLIENT_VERSION")
    visitor_data: str = Field("", alias="VISITOR_DATA")

    @field_validator("visitor_data", mode="before")
    @classmethod
    def _null_visitor_data(cls, v: Any) -> Any:
        return "" if v is None else v


class CaptionTrack(BaseModel):
    model_config = ConfigDict(frozen=True)

    language_label: str
    base_url: str
    language_code: str | None = None

    @classmethod
    def from_api(cls, track: dict[str, Any]) -> "CaptionTrack | None":
        base_url = str_or_none(track.get("baseUrl"))
        if not base_url:
            return None
        language_code = str_or_none(track.get("languageCode"))
        label = (
            traverse_obj(track, ("name", "simpleText"), ("name", "runs", 0, "text"))
            or language_code
            or "Unknown"
        )
        return cls(language_label=label, base_url=base_url, language_code=language_code)


class Format(BaseModel):
    """A single progressive (non-adaptive) stream."""

    model_config = ConfigDict(frozen=True)

    url: str | None = None
    height: int | None = None
    quality_label: str | None = None
    mime_type: str = ""

    @classmethod
    def from_api(cls, fmt: dict[str, Any]) -> "Format":
        return cls(
            url=str_or_none(fmt.get("url")),
            height=int_or_none(fmt.get("height")),
            quality_label=str_or_none(fmt.get("qualityLabel")),
            mime_type=fmt.get("mimeType") or "",
        )


class StreamingData(BaseModel):
    """Either an HLS manifest URL or a list of progressive formats (or both)."""

    hls_manifest_url: str | None = None
    formats: list[Format] = Field(default_factory=list)

    @property
    def has_manifest(self) -> bool:
        return bool(self.hls_manifest_url)


class PlayerResponse(BaseModel):
    caption_tracks: list[CaptionTrack] = Field(default_factory=list)
    streaming_data: StreamingData
    playability_status: str | None = None

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "PlayerResponse | None":
        """
        Build a PlayerResponse from the raw API JSON.

        Formats and caption tracks that fail to decode are skipped one by one.
        Returns None when ``streamingData`` is missing or carries neither a
        manifest URL nor any usable format.
        """
        streaming = data.get("streamingData")
        if not isinstance(streaming, dict):
            return None

        formats = _decode_items(Format, streaming.get("formats"))
        streaming_data = StreamingData(
            hls_manifest_url=str_or_none(streaming.get("hlsManifestUrl")),
            formats=[f for f in formats if f is not None],
        )
        if not streaming_data.has_manifest and not streaming_data.formats:
            return None

        tracks = _decode_items(
            CaptionTrack,
            traverse_obj(data, ("captions", "playerCaptionsTracklistRenderer", "captionTracks")),
        )

        return cls(
            caption_tracks=[t for t in tracks if t is not None],
            streaming_data=streaming_data,
            playability_status=str_or_none(traverse_obj(data, ("playabilityStatus", "status"))),
        )


def _decode_items(model: type[Format] | type[CaptionTrack], raw: Any) -> list:
    """Decode a JSON list with ``model.from_api``, dropping malformed entries."""
    if not isinstance(raw, list):
        return []
    items = []
    for entry in raw:
        if not isinstance(entry, dict):
            continue
        try:
            items.append(model.from_api(entry))
        except ValidationError as e:
            logger.warning("Skipping malformed %s: %s", model.__name__, e.errors()[0]["msg"])
    return items
