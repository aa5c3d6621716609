"""Shared fixtures for CLI integration tests.

The extractor built by the CLI is replaced by one wired to an
httpx mock transport, so tests run without network access.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx
import pytest

from src.etl.extractors.flixpatrol import FlixPatrolExtractor
from src.etl.types import FlixPatrolOptions
from tests.conftest import BASE_URL, PageMap


# ---------------------------------------------------------------------------
# Auto-mark all tests in this directory as "integration"
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """Auto-apply ``@pytest.mark.integration`` to every test collected here."""
    integration_marker = pytest.mark.integration
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(integration_marker)


# ---------------------------------------------------------------------------
# CLI wiring
# ---------------------------------------------------------------------------


@pytest.fixture
def serve_pages(
    monkeypatch: pytest.MonkeyPatch,
    make_transport: Callable[[PageMap], httpx.MockTransport],
) -> Callable[[PageMap], None]:
    """Route the CLI extractor to fixed pages.

    Also replaces ``setup_logger`` so the CLI does not attach handlers
    or create log files during tests.
    """
    monkeypatch.setattr(
        "src.__main__.setup_logger",
        lambda name: logging.getLogger(f"test.{name}"),
    )

    def serve(pages: PageMap) -> None:
        transport = make_transport(pages)
        monkeypatch.setattr(
            "src.__main__.FlixPatrolExtractor",
            lambda: FlixPatrolExtractor(FlixPatrolOptions(url=BASE_URL), transport=transport),
        )

    return serve
