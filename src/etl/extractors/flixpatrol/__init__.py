"""FlixPatrol extractor package.

Scrapes FlixPatrol top 10 ranking pages and resolves each title
to its TMDB id.

Classes:
    FlixPatrolExtractor: Top 10 orchestration with location fallback.
    FlixPatrolClient: Async page fetcher using httpx.

Functions:
    extract_matches: Ranking page links (pure).
    extract_tmdb_id: Detail page TMDB id (pure).

Usage:
    from src.etl.extractors.flixpatrol import FlixPatrolExtractor

    async with FlixPatrolExtractor() as extractor:
        ids = await extractor.get_top10("TV Shows", "hbo", "france", "world")
"""

from src.etl.extractors.flixpatrol.client import (
    FlixPatrolClient,
    FlixPatrolClientError,
    FlixPatrolFetchError,
)
from src.etl.extractors.flixpatrol.flixpatrol import FlixPatrolExtractor
from src.etl.extractors.flixpatrol.parser import extract_matches, extract_tmdb_id
from src.etl.types.flixpatrol import is_content_type, is_location, is_platform

__all__ = [
    "FlixPatrolExtractor",
    "FlixPatrolClient",
    "FlixPatrolClientError",
    "FlixPatrolFetchError",
    "extract_matches",
    "extract_tmdb_id",
    "is_location",
    "is_platform",
    "is_content_type",
]
