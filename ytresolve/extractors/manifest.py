"""
Turns a decoded player response into subtitle and link records.

Captions are published first, in API order. Then either the HLS manifest
is fetched and one link per variant is published, or, when the response
carries no manifest, the progressive video formats are published directly.
Failures past the captions are soft: they stop further output without
raising.
"""

import logging
from collections.abc import Callable

import httpx

from ..core.errors import EmptyVariantUrl, ManifestUnparseable
from ..core.http_client import HTTPClient
from ..core.languages import resolve_audio_language
from ..core.m3u8_parser import Playlist, Variant, parse_m3u8
from ..models.enums import LinkType
from ..models.innertube import CaptionTrack, Format, PlayerResponse
from ..models.response import ExtractorLink, SubtitleFile

logger = logging.getLogger(__name__)

SUBTITLE_FORMAT_SUFFIX = "&fmt=ttml"


class ManifestResolver:
    def __init__(
        self,
        http: HTTPClient,
        source: str = "YouTube",
        referer: str = "https://www.youtube.com/",
        headers: dict[str, str] | None = None,
    ):
        self.http = http
        self.source = source
        self.referer = referer
        self.headers = dict(headers) if headers else {}

    async def resolve_links(
        self,
        player_response: PlayerResponse,
        subtitle_callback: Callable[[SubtitleFile], None],
        callback: Callable[[ExtractorLink], None],
    ) -> int:
        """Publish subtitles and links for *player_response*; returns the link count."""
        for track in player_response.caption_tracks:
            subtitle_callback(self.subtitle_for(track))

        streaming = player_response.streaming_data
        if streaming.has_manifest:
            try:
                playlist = await self._fetch_playlist(streaming.hls_manifest_url)
            except ManifestUnparseable as e:
                logger.warning("Skipping media links: %s", e)
                return 0
            return self._emit_variants(playlist, callback)

        return self._emit_formats(streaming.formats, callback)

    def subtitle_for(self, track: CaptionTrack) -> SubtitleFile:
        return SubtitleFile(
            lang=track.language_label,
            url=f"{track.base_url}{SUBTITLE_FORMAT_SUFFIX}",
            headers=self.headers,
        )

    async def _fetch_playlist(self, manifest_url: str) -> Playlist:
        try:
            body = await self.http.get_text(manifest_url, headers=self.headers)
        except httpx.HTTPError as e:
            raise ManifestUnparseable(f"Failed to fetch HLS manifest: {e}") from e

        logger.debug("HLS playlist length=%d", len(body))
        playlist = parse_m3u8(body, base_url=manifest_url)
        logger.debug(
            "Playlist tags=%d stream-inf=%d variants=%d",
            len(playlist.tags),
            len(playlist.stream_inf_tags),
            len(playlist.variants),
        )
        return playlist

    def _emit_variants(self, playlist: Playlist, callback: Callable[[ExtractorLink], None]) -> int:
        count = 0
        for variant in playlist.variants:
            try:
                link = self.link_for_variant(variant)
            except EmptyVariantUrl as e:
                logger.debug("%s", e)
                continue
            callback(link)
            count += 1
        return count

    def link_for_variant(self, variant: Variant) -> ExtractorLink:
        """Build the HLS link for one variant, labelled with its own audio language."""
        if not variant.url.strip():
            raise EmptyVariantUrl(f"Variant has no URL: {variant.tag}")

        audio_id = variant.audio_content_id
        language = resolve_audio_language(audio_id) if audio_id else ""
        return ExtractorLink(
            source=self.source,
            name=f"{self.source} {language}" if language else self.source,
            url=variant.url,
            type=LinkType.HLS,
            quality=variant.height or 0,
            referer=self.referer,
        )

    def _emit_formats(self, formats: list[Format], callback: Callable[[ExtractorLink], None]) -> int:
        count = 0
        for fmt in formats:
            if not fmt.mime_type.startswith("video"):
                continue
            if not fmt.url:
                logger.debug("Skipping format without direct URL (%s)", fmt.quality_label)
                continue
            callback(
                ExtractorLink(
                    source=self.source,
                    name=f"{self.source} {fmt.quality_label}" if fmt.quality_label else self.source,
                    url=fmt.url,
                    type=LinkType.PROGRESSIVE,
                    quality=fmt.height or 0,
                    referer=self.referer,
                )
            )
            count += 1
        return count
