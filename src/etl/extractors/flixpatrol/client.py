"""FlixPatrol HTTP client.

Fetches ranking and detail pages from the FlixPatrol website
with a browser User-Agent.
"""

import logging
from types import TracebackType

import httpx

from src.settings import settings

logger = logging.getLogger(__name__)


class FlixPatrolClientError(Exception):
    """Base exception for FlixPatrol client errors."""

    pass


class FlixPatrolFetchError(FlixPatrolClientError):
    """Raised when a required page could not be fetched."""

    def __init__(self, path: str, message: str | None = None) -> None:
        """Initialize with the path that failed.

        Args:
            path: Requested page path.
            message: Optional error message.
        """
        self.path = path
        super().__init__(message or f"Unable to get FlixPatrol page: {path}")


class FlixPatrolClient:
    """Async HTTP client for FlixPatrol pages.

    Attributes:
        base_url: FlixPatrol website base URL.
        user_agent: User-Agent header sent with every request.
    """

    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            base_url: Base URL (defaults to FLIXPATROL_BASE_URL).
            user_agent: User-Agent (defaults to FLIXPATROL_USER_AGENT).
            transport: Optional httpx transport, used by tests.
        """
        self._base_url = (base_url or settings.flixpatrol.base_url).rstrip("/")
        self._user_agent = user_agent or settings.flixpatrol.user_agent
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        """Get the base URL."""
        return self._base_url

    @property
    def user_agent(self) -> str:
        """Get the User-Agent header value."""
        return self._user_agent

    # -------------------------------------------------------------------------
    # Context Manager
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "FlixPatrolClient":
        """Enter context and create HTTP client.

        Raises:
            FlixPatrolClientError: If the client is already open.
        """
        if self._client is not None:
            msg = "Client already open. Exit the current context first."
            raise FlixPatrolClientError(msg)

        kwargs: dict = {}
        if settings.flixpatrol.timeout is not None:
            kwargs["timeout"] = settings.flixpatrol.timeout
        self._client = httpx.AsyncClient(
            headers={"User-Agent": self._user_agent},
            follow_redirects=True,
            transport=self._transport,
            **kwargs,
        )
        return self

    async def __aexit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        """Exit context and close HTTP client.

        Args:
            _exc_type: Exception type if raised.
            _exc_val: Exception value if raised.
            _exc_tb: Exception traceback if raised.
        """
        if self._client:
            await self._client.aclose()
            self._client = None

    # -------------------------------------------------------------------------
    # HTTP Methods
    # -------------------------------------------------------------------------

    def build_url(self, path: str) -> str:
        """Build the absolute URL of a page.

        Args:
            path: Page path, or an absolute http(s) URL.

        Returns:
            Absolute URL.
        """
        if path.startswith(("http://", "https://")):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    async def fetch_page(self, path: str) -> str | None:
        """Get one FlixPatrol HTML page.

        Args:
            path: Page path relative to the base URL.

        Returns:
            Page HTML on HTTP 200, None otherwise.

        Raises:
            FlixPatrolClientError: If used outside the context manager.
        """
        if self._client is None:
            msg = "Client not initialized. Use async context manager."
            raise FlixPatrolClientError(msg)

        url = self.build_url(path)

        try:
            response = await self._client.get(url)
        except httpx.TransportError as e:
            logger.warning(f"Request failed for {url}: {e}")
            return None

        if response.status_code != 200:
            logger.debug(f"HTTP {response.status_code} for {url}")
            return None

        return response.text
