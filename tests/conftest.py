"""Fixtures pytest partagées pour tests FlixPatrol."""

from collections.abc import Callable

import httpx
import pytest

BASE_URL = "https://flixpatrol.test"

PageMap = dict[str, tuple[int, str]]


@pytest.fixture(autouse=True, scope="function")
def mock_env_for_tests(monkeypatch: pytest.MonkeyPatch) -> None:
    """Mock variables env pour tests reproductibles."""
    for var in (
        "FLIXPATROL_BASE_URL",
        "FLIXPATROL_USER_AGENT",
        "FLIXPATROL_TIMEOUT",
        "FLIXPATROL_FALLBACK_LOCATION",
    ):
        monkeypatch.delenv(var, raising=False)

    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("DEBUG", "false")
    monkeypatch.setenv("LOG_LEVEL", "INFO")


# =============================================================================
# HTML BUILDERS
# =============================================================================


def world_page(platform: str, movies: list[str], shows: list[str]) -> str:
    """Build a world ranking page with one container per content type."""

    def block(suffix: int, hrefs: list[str]) -> str:
        links = "".join(
            f'<tr><td><a class="hover:underline font-bold" href="{h}">T</a></td></tr>'
            for h in hrefs
        )
        return f'<div id="{platform}-{suffix}"><table>{links}</table></div>'

    return f"<html><body>{block(1, movies)}{block(2, shows)}</body></html>"


def country_page(sections: dict[str, list[str]]) -> str:
    """Build a country ranking page with "TOP 10 <type>" headings."""
    parts = []
    for content_type, hrefs in sections.items():
        links = "".join(f'<a class="hover:underline" href="{h}">T</a>' for h in hrefs)
        parts.append(
            f'<div class="card"><h3>TOP 10 {content_type}</h3>'
            f"<div><table><tr><td>{links}</td></tr></table></div></div>"
        )
    return f"<html><body>{''.join(parts)}</body></html>"


def detail_page(tmdb_path: str | None) -> str:
    """Build a title detail page, with a JSON-LD block if tmdb_path is set."""
    if tmdb_path is None:
        return "<html><head><title>No metadata</title></head><body></body></html>"
    return (
        '<html><head><script type="application/ld+json">'
        '{"@context": "https://schema.org", "@type": "Movie", '
        f'"sameAs": ["https://www.imdb.com/title/tt0133093/", "{tmdb_path}"]}}'
        "</script></head><body></body></html>"
    )


# =============================================================================
# HTTP MOCKS
# =============================================================================


@pytest.fixture
def requested_paths() -> list[str]:
    """Paths requested through the mock transport, in order."""
    return []


@pytest.fixture
def make_transport(
    requested_paths: list[str],
) -> Callable[[PageMap], httpx.MockTransport]:
    """Factory for an httpx mock transport serving fixed pages.

    Unknown paths answer 404.
    """

    def factory(pages: PageMap) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            requested_paths.append(request.url.path)
            status, body = pages.get(request.url.path, (404, "Not Found"))
            return httpx.Response(status, text=body)

        return httpx.MockTransport(handler)

    return factory
