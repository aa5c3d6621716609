"""FlixPatrol HTML parsing.

Pure functions over page HTML: ranking pages yield ordered
title-detail links, detail pages yield a TMDB id.
"""

import re
from collections.abc import Callable, Iterable

from bs4 import BeautifulSoup, NavigableString, Tag

from src.etl.types.flixpatrol import (
    TYPE_CONTAINER_SUFFIX,
    WORLD_LOCATION,
    FlixPatrolType,
)

LINK_CLASS = "hover:underline"

# "themoviedb.org" then anything but digits, then the id
TMDB_ID_PATTERN = re.compile(r"(themoviedb\.org)(\D*)(\d+)", re.IGNORECASE)

LinkStrategy = Callable[[BeautifulSoup, FlixPatrolType, str], list[str]]


# -------------------------------------------------------------------------
# Ranking pages
# -------------------------------------------------------------------------


def extract_matches(
    content_type: FlixPatrolType,
    location: str,
    platform: str,
    html: str,
) -> list[str]:
    """Extract title-detail links from a top 10 page.

    Args:
        content_type: "Movies" or "TV Shows".
        location: Location slug the page was fetched for.
        platform: Platform slug the page was fetched for.
        html: Ranking page HTML.

    Returns:
        Link targets in document order, possibly empty.
    """
    soup = BeautifulSoup(html, "html.parser")
    strategy = select_strategy(location)
    return strategy(soup, content_type, platform)


def select_strategy(location: str) -> LinkStrategy:
    """Pick the link extraction strategy for a location.

    Args:
        location: Location slug.

    Returns:
        World container strategy for "world", heading strategy otherwise.
    """
    if location == WORLD_LOCATION:
        return extract_world_links
    return extract_country_links


def extract_world_links(
    soup: BeautifulSoup,
    content_type: FlixPatrolType,
    platform: str,
) -> list[str]:
    """Collect links from the world ranking container.

    The world page holds one ``div#<platform>-<n>`` per content type,
    n being 1 for movies and 2 for TV shows.
    """
    container_id = f"{platform}-{TYPE_CONTAINER_SUFFIX[content_type]}"
    containers = soup.find_all("div", id=container_id)
    return _collect_hrefs(soup, containers, _has_link_class)


def extract_country_links(
    soup: BeautifulSoup,
    content_type: FlixPatrolType,
    _platform: str,
) -> list[str]:
    """Collect links following the "TOP 10 <type>" heading of a country page."""
    label = f"TOP 10 {content_type}"
    containers: list[Tag] = []
    for heading in soup.find_all("h3"):
        if _has_direct_text(heading, label):
            containers.extend(heading.find_next_siblings("div"))
    return _collect_hrefs(soup, containers, _is_link_class)


def _collect_hrefs(
    soup: BeautifulSoup,
    containers: Iterable[Tag],
    accept: Callable[[Tag], bool],
) -> list[str]:
    """Collect href values of accepted anchors inside containers.

    Anchors are returned once each, in document order, whatever
    the order or overlap of the containers.

    Args:
        soup: Parsed page.
        containers: Container elements.
        accept: Anchor filter.

    Returns:
        Ordered href values.
    """
    container_ids = {id(container) for container in containers}
    if not container_ids:
        return []

    return [
        anchor["href"]
        for anchor in soup.find_all("a", href=True)
        if accept(anchor) and any(id(parent) in container_ids for parent in anchor.parents)
    ]


def _class_attribute(tag: Tag) -> str:
    """Rebuild the raw class attribute value of a tag."""
    value = tag.get("class")
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return " ".join(value)


def _has_link_class(anchor: Tag) -> bool:
    return LINK_CLASS in _class_attribute(anchor)


def _is_link_class(anchor: Tag) -> bool:
    return _class_attribute(anchor) == LINK_CLASS


def _has_direct_text(tag: Tag, text: str) -> bool:
    """Check whether one of the tag's own text nodes equals text."""
    return any(
        type(child) is NavigableString and child == text for child in tag.children
    )


# -------------------------------------------------------------------------
# Detail pages
# -------------------------------------------------------------------------


def extract_tmdb_id(html: str) -> str | None:
    """Extract the TMDB id from a title detail page.

    Looks at the first JSON-LD script of the page, which links the
    title to its themoviedb.org page.

    Args:
        html: Detail page HTML.

    Returns:
        TMDB id as a string, or None if no link is found.
    """
    soup = BeautifulSoup(html, "html.parser")
    script = soup.find("script", type="application/ld+json")
    if not script or not script.string:
        return None

    match = TMDB_ID_PATTERN.search(script.string)
    return match.group(3) if match else None
