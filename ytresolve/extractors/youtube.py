"""
YouTube extractor - resolves a video page URL into HLS or progressive
links plus subtitle tracks through the InnerTube player API.

Pipeline:
1. extract the video id from the URL (any supported shape)
2. for WEB-style clients, scrape the session config from the watch page
3. POST the player request
4. publish captions, then HLS variants or progressive formats

The host variants below differ only in the base URL used for the watch
page and the link referer.
"""

import logging

from ..config import get_settings
from ..core.errors import SessionConfigUnavailable
from ..core.http_client import HTTPClient
from ..core.identifier import extract_video_id
from ..models.enums import Host, SessionPolicy
from ..models.innertube import ClientProfile, SessionConfig
from .base import BaseExtractor, LinkCallback, SubtitleCallback
from .innertube import (
    PlayerApiClient,
    SessionConfigResolver,
    default_session_config,
    get_client_profile,
)
from .manifest import ManifestResolver

logger = logging.getLogger(__name__)


class YouTubeExtractor(BaseExtractor):
    """YouTube link extractor."""

    name = "YouTube"
    main_url = "https://www.youtube.com"
    host = Host.WWW

    def __init__(
        self,
        client: str | ClientProfile | None = None,
        http: HTTPClient | None = None,
    ):
        super().__init__(http)
        if client is None:
            client = get_settings().default_client
        self.profile = client if isinstance(client, ClientProfile) else get_client_profile(client)

    async def _get_url(
        self,
        url: str,
        subtitle_callback: SubtitleCallback,
        callback: LinkCallback,
    ) -> None:
        logger.debug("%s: resolving %s with client=%s", self.name, url, self.profile.key)

        video_id = extract_video_id(url)

        config: SessionConfig | None = None
        if self.profile.requires_session_config:
            try:
                config = await self._session_config(video_id)
            except SessionConfigUnavailable as e:
                logger.error("%s: %s, aborting resolution", self.name, e)
                return

        player_response = await PlayerApiClient(self.http).fetch_player_response(
            video_id, self.profile, config
        )

        resolver = ManifestResolver(
            self.http,
            source=self.name,
            referer=self.referer,
            headers=self.profile.headers,
        )
        count = await resolver.resolve_links(
            player_response,
            self._safe_sink(subtitle_callback),
            self._safe_sink(callback),
        )
        logger.info(
            "%s: %s resolved to %d links, %d subtitles",
            self.name,
            video_id,
            count,
            len(player_response.caption_tracks),
        )

    async def _session_config(self, video_id: str) -> SessionConfig:
        """
        Page config for the player request, with the profile's fallback policy applied.

        Raises:
            SessionConfigUnavailable: when the page yields no config and the
                profile does not allow defaults.
        """
        config = await SessionConfigResolver(self.http).resolve(
            video_id, self.profile, self.main_url
        )
        if config is not None:
            return config

        if self.profile.on_missing_config == SessionPolicy.DEFAULTS:
            logger.warning("%s: page config unavailable, using built-in defaults", self.name)
            return default_session_config(self.profile)

        raise SessionConfigUnavailable(f"No page config for video {video_id}")


class YouTubeShortLinkExtractor(YouTubeExtractor):
    main_url = "https://youtu.be"
    host = Host.SHORT_LINK


class YouTubeMobileExtractor(YouTubeExtractor):
    main_url = "https://m.youtube.com"
    host = Host.MOBILE


class YouTubeNoCookieExtractor(YouTubeExtractor):
    main_url = "https://www.youtube-nocookie.com"
    host = Host.NO_COOKIE
