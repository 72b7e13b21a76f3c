from pydantic import BaseModel, Field

from .enums import LinkType


class ExtractorLink(BaseModel):
    """A playable media link published to the link sink."""

    source: str = Field(..., description="Name of the extractor that produced the link")
    name: str = Field(..., description="Display name, e.g. 'YouTube English' or 'YouTube 720p'")
    url: str = Field(..., description="Direct URL to the stream or variant playlist")
    type: LinkType = Field(..., description="hls or progressive")
    quality: int = Field(0, description="Video height in pixels, 0 when unknown")
    referer: str = Field("", description="Referer to send when fetching the stream")
    headers: dict[str, str] = Field(default_factory=dict, description="Extra request headers")


class SubtitleFile(BaseModel):
    """A subtitle track published to the subtitle sink."""

    lang: str = Field(..., description="Language label as shown by the provider")
    url: str = Field(..., description="URL to the subtitle file (TTML)")
    headers: dict[str, str] = Field(default_factory=dict, description="Required HTTP headers")


class ResolveResponse(BaseModel):
    """Response model for the /resolve endpoint."""

    success: bool = Field(True, description="Whether the resolution completed")
    id: str = Field(..., description="Video identifier")
    client: str = Field(..., description="Client profile used for the player request")
    links: list[ExtractorLink] = Field(default_factory=list, description="Links in emission order")
    subtitles: list[SubtitleFile] = Field(
        default_factory=list, description="Subtitles in caption-track order"
    )


class ErrorResponse(BaseModel):
    """Error response model."""

    success: bool = Field(False)
    error: str = Field(..., description="Error message")
    error_code: str | None = Field(None, description="Machine-readable error code")
