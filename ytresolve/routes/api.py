"""
API route definitions for the link resolver service.
"""

import logging

from fastapi import APIRouter, HTTPException

from ..config import get_settings
from ..core.errors import (
    ApiRequestFailed,
    ExtractionError,
    NoIdentifierFound,
    ResolutionAborted,
)
from ..core.identifier import extract_video_id, get_supported_patterns
from ..extractors import detect_host, get_extractor
from ..extractors.innertube import CLIENT_PROFILES
from ..models.enums import Host
from ..models.request import ResolveRequest
from ..models.response import ErrorResponse, ExtractorLink, ResolveResponse, SubtitleFile

logger = logging.getLogger(__name__)

router = APIRouter()

# Exception type -> HTTP status for fatal resolution errors
_ERROR_STATUS: dict[type[ExtractionError], int] = {
    NoIdentifierFound: 400,
    ApiRequestFailed: 502,
    ResolutionAborted: 504,
}


def _error(status_code: int, message: str, error_code: str | None) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={"success": False, "error": message, "error_code": error_code},
    )


@router.post(
    "/resolve",
    response_model=ResolveResponse,
    responses={
        400: {"model": ErrorResponse, "description": "No video id in URL or unknown client"},
        502: {"model": ErrorResponse, "description": "Player API request failed"},
        504: {"model": ErrorResponse, "description": "Resolution timed out"},
        500: {"model": ErrorResponse, "description": "Resolution failed"},
    },
    summary="Resolve a video page URL into playable links and subtitles",
)
async def resolve(request: ResolveRequest):
    """
    Run one resolution and return everything the sinks received, in
    emission order.
    """
    settings = get_settings()
    url = request.url.strip()

    try:
        video_id = extract_video_id(url)
    except NoIdentifierFound as e:
        raise _error(400, str(e), e.error_code)

    client = request.client or settings.default_client
    host = request.host or detect_host(url)
    try:
        extractor = get_extractor(host, client=client)
    except ValueError as e:
        raise _error(400, str(e), "client.unknown")

    logger.info(f"Resolving {video_id} (host={host.value}, client={client})")

    links: list[ExtractorLink] = []
    subtitles: list[SubtitleFile] = []
    try:
        await extractor.get_url(
            url,
            subtitles.append,
            links.append,
            timeout=request.timeout or settings.resolve_timeout,
        )
    except ExtractionError as e:
        status_code = _ERROR_STATUS.get(type(e), 500)
        raise _error(status_code, str(e), e.error_code or "extraction.failed")

    return ResolveResponse(id=video_id, client=client, links=links, subtitles=subtitles)


@router.get(
    "/clients",
    summary="List client profiles and host variants",
)
async def list_clients():
    return {
        "default": get_settings().default_client,
        "clients": [
            {
                "key": p.key,
                "client_name": p.client_name.value,
                "client_version": p.client_version,
                "requires_session_config": p.requires_session_config,
                "on_missing_config": p.on_missing_config.value,
            }
            for p in CLIENT_PROFILES.values()
        ],
        "hosts": [h.value for h in Host],
        "url_patterns": get_supported_patterns(),
    }


@router.get(
    "/health",
    summary="Health check",
)
async def health_check():
    return {"status": "ok"}
