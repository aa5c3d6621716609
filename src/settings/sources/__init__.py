"""Data source settings.

Exports configuration classes for scraped sources:
- FlixPatrol (Scraping)
"""

from src.settings.sources.flixpatrol import FlixPatrolSettings

__all__ = [
    "FlixPatrolSettings",
]
