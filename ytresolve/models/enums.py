from enum import Enum


class LinkType(str, Enum):
    HLS = "hls"
    PROGRESSIVE = "progressive"


class ClientName(str, Enum):
    WEB = "WEB"
    ANDROID = "ANDROID"


class SessionPolicy(str, Enum):
    """What to do when a profile needs a session config and none was found."""

    DEFAULTS = "defaults"
    ABORT = "abort"


class Host(str, Enum):
    WWW = "www"
    SHORT_LINK = "short_link"
    MOBILE = "mobile"
    NO_COOKIE = "no_cookie"
