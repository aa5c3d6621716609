"""Tests for the FlixPatrol HTTP client."""

from collections.abc import Callable

import httpx
import pytest

from src.etl.extractors.flixpatrol.client import (
    FlixPatrolClient,
    FlixPatrolClientError,
    FlixPatrolFetchError,
)
from tests.conftest import BASE_URL, PageMap


@pytest.mark.unit
class TestFlixPatrolClient:
    """Tests for FlixPatrolClient."""

    @staticmethod
    def test_defaults_from_settings() -> None:
        client = FlixPatrolClient()
        assert client.base_url == "https://flixpatrol.com"
        assert client.user_agent.startswith("Mozilla/5.0")

    @staticmethod
    def test_overrides() -> None:
        client = FlixPatrolClient(base_url=f"{BASE_URL}/", user_agent="test-agent")
        assert client.base_url == BASE_URL
        assert client.user_agent == "test-agent"

    @staticmethod
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/top10/netflix/world", f"{BASE_URL}/top10/netflix/world"),
            ("top10/netflix/world", f"{BASE_URL}/top10/netflix/world"),
            ("https://cdn.example.com/title/x/", "https://cdn.example.com/title/x/"),
        ],
    )
    def test_build_url(path: str, expected: str) -> None:
        assert FlixPatrolClient(base_url=BASE_URL).build_url(path) == expected

    @staticmethod
    async def test_fetch_outside_context_raises() -> None:
        client = FlixPatrolClient(base_url=BASE_URL)
        with pytest.raises(FlixPatrolClientError, match="context manager"):
            await client.fetch_page("/top10/netflix/world")

    @staticmethod
    async def test_fetch_returns_body_on_200(
        make_transport: Callable[[PageMap], httpx.MockTransport],
    ) -> None:
        transport = make_transport({"/top10/hbo/france": (200, "<html>ok</html>")})
        async with FlixPatrolClient(base_url=BASE_URL, transport=transport) as client:
            assert await client.fetch_page("/top10/hbo/france") == "<html>ok</html>"

    @staticmethod
    @pytest.mark.parametrize("status", [201, 301, 404, 500, 503])
    async def test_fetch_returns_none_on_non_200(
        status: int,
        make_transport: Callable[[PageMap], httpx.MockTransport],
    ) -> None:
        transport = make_transport({"/page": (status, "body")})
        async with FlixPatrolClient(base_url=BASE_URL, transport=transport) as client:
            assert await client.fetch_page("/page") is None

    @staticmethod
    async def test_fetch_returns_none_on_transport_error() -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        transport = httpx.MockTransport(handler)
        async with FlixPatrolClient(base_url=BASE_URL, transport=transport) as client:
            assert await client.fetch_page("/top10/netflix/world") is None

    @staticmethod
    async def test_user_agent_header_sent() -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.headers["User-Agent"])
            return httpx.Response(200, text="ok")

        transport = httpx.MockTransport(handler)
        async with FlixPatrolClient(
            base_url=BASE_URL, user_agent="agent/1.0", transport=transport
        ) as client:
            await client.fetch_page("/")

        assert seen == ["agent/1.0"]

    @staticmethod
    async def test_client_closed_on_exit(
        make_transport: Callable[[PageMap], httpx.MockTransport],
    ) -> None:
        client = FlixPatrolClient(base_url=BASE_URL, transport=make_transport({}))
        async with client:
            pass
        with pytest.raises(FlixPatrolClientError):
            await client.fetch_page("/")

    @staticmethod
    async def test_reentering_open_client_raises(
        make_transport: Callable[[PageMap], httpx.MockTransport],
    ) -> None:
        transport = make_transport({"/page": (200, "body")})
        async with FlixPatrolClient(base_url=BASE_URL, transport=transport) as client:
            with pytest.raises(FlixPatrolClientError, match="already open"):
                await client.__aenter__()
            assert await client.fetch_page("/page") == "body"

    @staticmethod
    async def test_client_can_be_reopened_after_exit(
        make_transport: Callable[[PageMap], httpx.MockTransport],
    ) -> None:
        transport = make_transport({"/page": (200, "body")})
        client = FlixPatrolClient(base_url=BASE_URL, transport=transport)
        async with client:
            pass
        async with client:
            assert await client.fetch_page("/page") == "body"


@pytest.mark.unit
class TestFlixPatrolFetchError:
    @staticmethod
    def test_is_client_error() -> None:
        assert issubclass(FlixPatrolFetchError, FlixPatrolClientError)

    @staticmethod
    def test_keeps_path_and_message() -> None:
        error = FlixPatrolFetchError("/top10/netflix/world")
        assert error.path == "/top10/netflix/world"
        assert "/top10/netflix/world" in str(error)
