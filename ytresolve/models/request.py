from pydantic import BaseModel, Field

from .enums import Host


class ResolveRequest(BaseModel):
    """Request model for the /resolve endpoint."""

    url: str = Field(
        ...,
        max_length=4096,
        description="URL of the video page (watch, short link, embed, oEmbed, ...)",
        examples=["https://www.youtube.com/watch?v=dQw4w9WgXcQ"],
    )
    client: str | None = Field(
        default=None,
        description="Client profile to use (web, web_fallback, android). Defaults to settings.",
    )
    host: Host | None = Field(
        default=None,
        description="Host variant for page fetches and referers. Detected from the URL if omitted.",
    )
    timeout: float | None = Field(
        default=None,
        gt=0,
        le=300,
        description="Deadline in seconds for the whole resolution",
    )
