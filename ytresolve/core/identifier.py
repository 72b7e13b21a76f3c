"""
Video identifier extraction for YouTube URLs.

Each known URL shape is described by an IdPattern: one or more marker
substrings, the terminators that end the captured value, and whether the
captured value is itself a percent-encoded URL (oEmbed and attribution
redirectors) that has to be decoded and matched again.

Patterns are tried in order and the first non-empty capture wins, so the
redirector patterns come before the generic ``watch?v=`` family whose
markers can also appear inside a wrapped URL.
"""

import logging
from urllib.parse import unquote

from .errors import NoIdentifierFound

logger = logging.getLogger(__name__)

# Redirectors found at this depth are not unwrapped again
MAX_REDIRECT_DEPTH = 1

_QUERY_TERMINATORS = ("&", "#")
_PATH_TERMINATORS = ("?", "&", "#")
_ENCODED_TERMINATORS = ("%26", "&", "#")


class IdPattern:
    """A single URL shape that can yield a video identifier."""

    def __init__(
        self,
        name: str,
        markers: tuple[str, ...],
        terminators: tuple[str, ...] = _QUERY_TERMINATORS,
        requires: str | None = None,
        redirect: bool = False,
    ):
        self.name = name
        self.markers = markers
        self.terminators = terminators
        self.requires = requires
        self.redirect = redirect

    def capture(self, url: str) -> str | None:
        """Return the raw value following the earliest marker, or None."""
        if self.requires and self.requires not in url:
            return None

        positions = [(url.find(m), m) for m in self.markers if m in url]
        if not positions:
            return None

        start, marker = min(positions)
        value = url[start + len(marker) :]
        for terminator in self.terminators:
            value = value.split(terminator, 1)[0]
        return value


_PATTERNS: list[IdPattern] = [
    # Redirectors carrying a full, percent-encoded URL
    IdPattern("oembed", ("?url=", "&url="), requires="oembed", redirect=True),
    IdPattern("attribution_link", ("?u=", "&u="), requires="attribution_link", redirect=True),
    # Query parameter forms
    IdPattern("watch", ("watch?v=",)),
    IdPattern("query_v", ("&v=",)),
    # Path forms
    IdPattern("short_link", ("youtu.be/",), _PATH_TERMINATORS),
    IdPattern("embed", ("/embed/",), _PATH_TERMINATORS),
    IdPattern("v", ("/v/",), _PATH_TERMINATORS),
    IdPattern("e", ("/e/",), _PATH_TERMINATORS),
    IdPattern("shorts", ("/shorts/",), _PATH_TERMINATORS),
    IdPattern("live", ("/live/",), _PATH_TERMINATORS),
    IdPattern("watch_path", ("/watch/",), _PATH_TERMINATORS),
    # Partially encoded forms (only the query got encoded)
    IdPattern("encoded_watch", ("watch%3Fv%3D",), _ENCODED_TERMINATORS),
    IdPattern("encoded_v", ("v%3D",), _ENCODED_TERMINATORS),
]


def extract_video_id(url: str, depth: int = 0) -> str:
    """
    Extract the canonical video identifier from any supported URL shape.

    Redirector URLs (oEmbed ``url=``, attribution ``u=``) are decoded and
    matched again, at most MAX_REDIRECT_DEPTH levels deep.

    Raises:
        NoIdentifierFound: when no pattern yields a non-empty identifier.
    """
    url = url.strip()

    for pattern in _PATTERNS:
        if pattern.redirect and depth >= MAX_REDIRECT_DEPTH:
            continue

        value = pattern.capture(url)
        if not value:
            continue

        if pattern.redirect:
            inner = unquote(value)
            logger.debug("Unwrapping %s redirector (depth %d): %s", pattern.name, depth, inner)
            return extract_video_id(inner, depth + 1)

        logger.debug("Matched %s pattern: id=%s", pattern.name, value)
        return value

    raise NoIdentifierFound(f"No video id found in URL: {url}")


def get_supported_patterns() -> list[str]:
    """Names of the URL shapes understood by extract_video_id, in match order."""
    return [p.name for p in _PATTERNS]
