"""FlixPatrol top 10 extractor.

Scrapes a FlixPatrol ranking page, then follows each title link
to resolve its TMDB id from the detail page metadata.
"""

import logging
from types import TracebackType
from typing import Literal

import httpx

from src.etl.extractors.flixpatrol.client import FlixPatrolClient, FlixPatrolFetchError
from src.etl.extractors.flixpatrol.parser import extract_matches, extract_tmdb_id
from src.etl.types.flixpatrol import FlixPatrolOptions, FlixPatrolType

logger = logging.getLogger(__name__)


class FlixPatrolExtractor:
    """Resolves FlixPatrol top 10 rankings to TMDB ids.

    Options are fixed at construction. Pages are fetched one at a
    time, detail pages in ranking order.

    Usage:
        async with FlixPatrolExtractor() as extractor:
            ids = await extractor.get_top10("Movies", "netflix", "france", "world")

    Attributes:
        options: Resolved base URL and User-Agent.
    """

    def __init__(
        self,
        options: FlixPatrolOptions | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize extractor.

        Args:
            options: Base URL and User-Agent overrides.
            transport: Optional httpx transport, used by tests.
        """
        options = options or FlixPatrolOptions()
        self._client = FlixPatrolClient(
            base_url=options.url,
            user_agent=options.agent,
            transport=transport,
        )
        self._options = FlixPatrolOptions(
            url=self._client.base_url,
            agent=self._client.user_agent,
        )

    @property
    def options(self) -> FlixPatrolOptions:
        """Get the resolved options."""
        return self._options

    async def __aenter__(self) -> "FlixPatrolExtractor":
        """Open the underlying HTTP client."""
        await self._client.__aenter__()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Close the underlying HTTP client."""
        await self._client.__aexit__(exc_type, exc_val, exc_tb)

    # -------------------------------------------------------------------------
    # Top 10
    # -------------------------------------------------------------------------

    async def get_top10(
        self,
        content_type: FlixPatrolType,
        platform: str,
        location: str,
        fallback: str | Literal[False] | None = False,
    ) -> list[str]:
        """Get the TMDB ids of a FlixPatrol top 10.

        If the ranking is empty and a fallback location is given, the
        fallback ranking is used instead. The fallback is tried once.

        Args:
            content_type: "Movies" or "TV Shows".
            platform: Platform slug (e.g. 'netflix').
            location: Location slug (e.g. 'france' or 'world').
            fallback: Location to use on an empty ranking, or False.

        Returns:
            TMDB ids in ranking order. Titles without a TMDB link are skipped.

        Raises:
            FlixPatrolFetchError: If the ranking or a detail page cannot be fetched.
        """
        path = f"/top10/{platform}/{location}"
        html = await self._client.fetch_page(path)
        if html is None:
            logger.error("FlixPatrol Error: unable to get FlixPatrol top10 page")
            raise FlixPatrolFetchError(path)

        matches = extract_matches(content_type, location, platform, html)

        if fallback and not matches:
            logger.warning(
                f"No {content_type} found for {platform}, falling back to {fallback} search"
            )
            return await self.get_top10(content_type, platform, fallback, False)

        tmdb_ids: list[str] = []
        for match in matches:
            tmdb_id = await self.resolve_one_id(match)
            if tmdb_id:
                tmdb_ids.append(tmdb_id)

        logger.info(
            f"{platform}/{location} {content_type}: "
            f"{len(tmdb_ids)}/{len(matches)} titles resolved"
        )
        return tmdb_ids

    async def resolve_one_id(self, match: str) -> str | None:
        """Resolve one title link to its TMDB id.

        Args:
            match: Detail page path from a ranking page.

        Returns:
            TMDB id, or None when the page has no TMDB link.

        Raises:
            FlixPatrolFetchError: If the detail page cannot be fetched.
        """
        html = await self._client.fetch_page(match)
        if html is None:
            logger.error("FlixPatrol Error: unable to get FlixPatrol detail page")
            raise FlixPatrolFetchError(match)

        tmdb_id = extract_tmdb_id(html)
        if tmdb_id is None:
            logger.debug(f"No TMDB id found on {match}")
        return tmdb_id
