"""ETL extractors package.

Provides data extraction from scraped sources:
- FlixPatrol: Top 10 rankings resolved to TMDB ids

Classes:
    FlixPatrolExtractor: FlixPatrol top 10 extractor.
"""

from src.etl.extractors.flixpatrol import (
    FlixPatrolClient,
    FlixPatrolClientError,
    FlixPatrolExtractor,
    FlixPatrolFetchError,
)

__all__ = [
    # FlixPatrol
    "FlixPatrolExtractor",
    "FlixPatrolClient",
    "FlixPatrolClientError",
    "FlixPatrolFetchError",
]
