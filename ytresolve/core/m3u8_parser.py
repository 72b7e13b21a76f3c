"""
HLS (M3U8) multivariant playlist parser.

Every ``#EXT-X-STREAM-INF`` tag is parsed together with the URI line that
follows it into a single Variant record, so a variant always carries the
attributes of its own tag. A tag that is not followed by a URI before the
next stream-inf tag produces no variant.
"""

import logging
from urllib.parse import urljoin

from ..utils.helpers import int_or_none, parse_m3u8_attributes
from .errors import ManifestUnparseable

logger = logging.getLogger(__name__)

STREAM_INF_TAG = "#EXT-X-STREAM-INF"
AUDIO_CONTENT_ID_ATTR = "YT-EXT-AUDIO-CONTENT-ID"


class Variant:
    """One adaptive rendition of a multivariant playlist."""

    def __init__(
        self,
        url: str,
        tag: str,
        attributes: dict[str, str] | None = None,
    ):
        self.url = url
        self.tag = tag
        self.attributes = attributes or {}

        self.width: int | None = None
        self.height: int | None = None
        resolution = self.attributes.get("RESOLUTION", "")
        if "x" in resolution:
            width, height = resolution.split("x", 1)
            self.width = int_or_none(width)
            self.height = int_or_none(height)

        self.bandwidth = int_or_none(self.attributes.get("BANDWIDTH"))
        self.codecs = self.attributes.get("CODECS")

    @property
    def audio_content_id(self) -> str:
        return (self.attributes.get(AUDIO_CONTENT_ID_ATTR) or "").strip()

    def __repr__(self) -> str:
        return f"Variant(height={self.height}, audio={self.audio_content_id!r}, url={self.url!r})"


class Playlist:
    """Parsed HLS multivariant playlist."""

    def __init__(self):
        self.tags: list[str] = []
        self.variants: list[Variant] = []

    @property
    def stream_inf_tags(self) -> list[str]:
        return [t for t in self.tags if t.startswith(STREAM_INF_TAG)]


def parse_m3u8(content: str, base_url: str = "") -> Playlist:
    """
    Parse a multivariant M3U8 playlist.

    Args:
        content: The M3U8 playlist content
        base_url: Base URL for resolving relative variant URLs

    Raises:
        ManifestUnparseable: if the content is not an M3U8 playlist.
    """
    lines = [line.strip() for line in content.strip().splitlines()]
    if not lines or not lines[0].startswith("#EXTM3U"):
        raise ManifestUnparseable("Content does not start with #EXTM3U")

    playlist = Playlist()
    pending_tag: str | None = None

    for line in lines:
        if not line:
            continue

        if line.startswith("#"):
            playlist.tags.append(line)
            if line.startswith(STREAM_INF_TAG):
                if pending_tag is not None:
                    logger.warning("Stream-inf tag without URI, dropping: %s", pending_tag)
                pending_tag = line
            continue

        if pending_tag is None:
            logger.debug("URI line without stream-inf tag, ignoring: %s", line)
            continue

        url = line
        if not url.startswith("http"):
            url = urljoin(base_url, url)

        attrs = parse_m3u8_attributes(pending_tag.split(":", 1)[1]) if ":" in pending_tag else {}
        playlist.variants.append(Variant(url=url, tag=pending_tag, attributes=attrs))
        pending_tag = None

    if pending_tag is not None:
        logger.warning("Trailing stream-inf tag without URI: %s", pending_tag)

    return playlist
