"""ETL data types package.

Exports the enumerations, options and TypedDict definitions
used by the FlixPatrol top 10 resolver.

Usage:
    from src.etl.types import FlixPatrolOptions, Top10Result
"""

from src.etl.types.flixpatrol import (
    FLIXPATROL_LOCATIONS,
    FLIXPATROL_PLATFORMS,
    FLIXPATROL_TYPES,
    TYPE_CONTAINER_SUFFIX,
    WORLD_LOCATION,
    FlixPatrolOptions,
    FlixPatrolType,
    Top10Result,
    is_content_type,
    is_location,
    is_platform,
)

__all__ = [
    # Enumerations
    "FLIXPATROL_LOCATIONS",
    "FLIXPATROL_PLATFORMS",
    "FLIXPATROL_TYPES",
    "TYPE_CONTAINER_SUFFIX",
    "WORLD_LOCATION",
    "FlixPatrolType",
    # Predicates
    "is_location",
    "is_platform",
    "is_content_type",
    # Options and results
    "FlixPatrolOptions",
    "Top10Result",
]
