"""Exception hierarchy for the resolution pipeline."""


class ExtractionError(Exception):
    """Raised when media extraction fails."""

    error_code: str | None = None

    def __init__(self, message: str, error_code: str | None = None):
        super().__init__(message)
        if error_code is not None:
            self.error_code = error_code


class NoIdentifierFound(ExtractionError):
    """The input URL matches none of the known video URL shapes."""

    error_code = "url.no_id"


class SessionConfigUnavailable(ExtractionError):
    """The watch page did not yield a usable ytcfg blob."""

    error_code = "youtube.session_config"


class ApiRequestFailed(ExtractionError):
    """The player endpoint failed at transport level or returned no streaming data."""

    error_code = "youtube.player_api"


class ManifestUnparseable(ExtractionError):
    """The HLS manifest could not be fetched or is not an M3U8 playlist."""

    error_code = "youtube.manifest"


class EmptyVariantUrl(ExtractionError):
    error_code = "youtube.empty_variant"


class ResolutionAborted(ExtractionError):
    """The resolution hit the caller's deadline before finishing."""

    error_code = "youtube.timeout"
