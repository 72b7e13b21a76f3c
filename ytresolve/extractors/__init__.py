"""
YouTube link extractors.

One extractor class per page host; every class runs the same pipeline and
accepts any client profile.
"""

from urllib.parse import urlparse

from ..core.errors import ExtractionError
from ..core.http_client import HTTPClient
from ..models.enums import Host
from ..models.innertube import ClientProfile
from .base import BaseExtractor

# Lazy imports to speed up startup
_EXTRACTOR_MAP: dict[Host, type[BaseExtractor]] | None = None

_HOSTNAMES: dict[str, Host] = {
    "youtu.be": Host.SHORT_LINK,
    "m.youtube.com": Host.MOBILE,
    "youtube-nocookie.com": Host.NO_COOKIE,
}


def _load_extractors() -> dict[Host, type[BaseExtractor]]:
    from .youtube import (
        YouTubeExtractor,
        YouTubeMobileExtractor,
        YouTubeNoCookieExtractor,
        YouTubeShortLinkExtractor,
    )

    return {
        Host.WWW: YouTubeExtractor,
        Host.SHORT_LINK: YouTubeShortLinkExtractor,
        Host.MOBILE: YouTubeMobileExtractor,
        Host.NO_COOKIE: YouTubeNoCookieExtractor,
    }


def detect_host(url: str) -> Host:
    """Pick the host variant from the URL's hostname; anything else is the main host."""
    try:
        parsed = urlparse(url.strip() if "://" in url else f"https://{url.strip()}")
    except ValueError:
        return Host.WWW
    hostname = (parsed.hostname or "").removeprefix("www.")
    return _HOSTNAMES.get(hostname, Host.WWW)


def get_extractor(
    host: Host = Host.WWW,
    client: str | ClientProfile | None = None,
    http: HTTPClient | None = None,
) -> BaseExtractor:
    """Get an extractor instance for the given host variant."""
    global _EXTRACTOR_MAP
    if _EXTRACTOR_MAP is None:
        _EXTRACTOR_MAP = _load_extractors()

    extractor_class = _EXTRACTOR_MAP.get(host)
    if extractor_class is None:
        raise ExtractionError(f"No extractor available for host: {host}")

    return extractor_class(client=client, http=http)


def get_extractor_for_url(
    url: str,
    client: str | ClientProfile | None = None,
    http: HTTPClient | None = None,
) -> BaseExtractor:
    return get_extractor(detect_host(url), client=client, http=http)


__all__ = [
    "BaseExtractor",
    "ExtractionError",
    "detect_host",
    "get_extractor",
    "get_extractor_for_url",
]
