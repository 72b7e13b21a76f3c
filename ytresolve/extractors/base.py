"""
Base extractor class for link resolvers.

An extractor takes a page URL and pushes what it finds to two caller
supplied sinks: one for subtitles, one for playable links. Nothing is
returned in bulk.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TypeVar

from ..core.errors import ExtractionError, ResolutionAborted
from ..core.http_client import HTTPClient
from ..models.response import ExtractorLink, SubtitleFile

logger = logging.getLogger(__name__)

SubtitleCallback = Callable[[SubtitleFile], None]
LinkCallback = Callable[[ExtractorLink], None]

_T = TypeVar("_T")


class BaseExtractor(ABC):
    """
    Abstract base class for all extractors.

    Subclasses must implement:
    - name / main_url: identity and page host
    - _get_url(): the resolution logic

    Provides the HTTP client lifecycle, the resolution deadline, error
    wrapping and safe sink invocation.
    """

    name: str
    main_url: str

    def __init__(self, http: HTTPClient | None = None):
        self._http = http
        self._owns_http = http is None

    @property
    def http(self) -> HTTPClient:
        """Lazy-initialized HTTP client."""
        if self._http is None:
            self._http = HTTPClient()
        return self._http

    async def close(self):
        """Clean up the HTTP client if this extractor created it."""
        if self._http and self._owns_http:
            await self._http.close()
            self._http = None

    @property
    def referer(self) -> str:
        return f"{self.main_url}/"

    async def get_url(
        self,
        url: str,
        subtitle_callback: SubtitleCallback,
        callback: LinkCallback,
        timeout: float | None = None,
    ) -> None:
        """
        Resolve *url* and publish results to the callbacks as they are found.

        Args:
            url: The page URL to resolve
            subtitle_callback: Receives each SubtitleFile
            callback: Receives each ExtractorLink
            timeout: Deadline in seconds for the whole resolution

        Raises:
            ExtractionError: for fatal failures (including ResolutionAborted
                when the deadline expires).
        """
        try:
            work = self._get_url(url, subtitle_callback, callback)
            if timeout is None:
                await work
            else:
                await asyncio.wait_for(work, timeout)
        except asyncio.TimeoutError:
            logger.warning("%s: resolution of %s aborted after %.1fs", self.name, url, timeout)
            raise ResolutionAborted(f"Resolution timed out after {timeout}s")
        except ExtractionError:
            raise
        except Exception as e:
            logger.exception(f"Extraction failed for {self.name}: {e}")
            raise ExtractionError(
                f"Failed to extract from {self.name}: {e!s}",
                error_code="extraction.failed",
            )
        finally:
            await self.close()

    @abstractmethod
    async def _get_url(
        self,
        url: str,
        subtitle_callback: SubtitleCallback,
        callback: LinkCallback,
    ) -> None:
        """Perform the resolution, invoking the callbacks incrementally."""
        ...

    # === Common utility methods ===

    def _safe_sink(self, sink: Callable[[_T], None]) -> Callable[[_T], None]:
        """Wrap a sink so that a failing consumer never aborts the resolution."""

        def emit(item: _T) -> None:
            try:
                sink(item)
            except Exception:
                logger.exception("%s: sink rejected %r", self.name, item)

        return emit

