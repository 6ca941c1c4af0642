"""
Base client for external data source clients.

Provides: lazy aiohttp session management, structured request logging,
and the DataSourceError taxonomy used by every client.

Each call is a single round trip with no retry, rate limiting or caching.
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from typing import Any

import aiohttp
from pydantic import BaseModel

logger = logging.getLogger("compound_xref.data_sources")


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ClientConfig(BaseModel):
    """Connection settings for a data source client."""

    base_url: str = ""
    timeout_seconds: float | None = None  # None keeps aiohttp's default


# ---------------------------------------------------------------------------
# Request context (for structured logging)
# ---------------------------------------------------------------------------


class RequestContext(BaseModel):
    """Metadata attached to every outgoing request for logging."""

    source: str  # e.g. "unichem"
    method: str  # e.g. "fetch_mappings"
    params: dict[str, Any] = {}


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class DataSourceError(Exception):
    """Base exception for data source failures."""

    def __init__(self, source: str, message: str, status_code: int | None = None):
        self.source = source
        self.status_code = status_code
        super().__init__(f"[{source}] {message}")


class ResponseParseError(DataSourceError):
    """Raised when a response body does not have the expected shape."""

    pass


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------


class BaseClient(ABC):
    """
    Abstract base for REST clients.

    Subclasses implement `_source_name` and their own typed methods that
    call `_rest_get()`.
    """

    def __init__(self, config: ClientConfig | None = None):
        self.config = config or ClientConfig()
        self._session: aiohttp.ClientSession | None = None

    @property
    @abstractmethod
    def _source_name(self) -> str:
        """Identifier for this data source, e.g. 'unichem'."""
        ...

    # -- Session management --------------------------------------------------

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            if self.config.timeout_seconds is None:
                self._session = aiohttp.ClientSession()
            else:
                timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
                self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.close()

    # -- Core request --------------------------------------------------------

    async def _rest_get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        *,
        context: RequestContext | None = None,
    ) -> Any:
        """
        Make one HTTP GET request and return the decoded JSON body.

        Parameters
        ----------
        url : str
            Full URL.
        params : dict, optional
            Query string parameters.
        context : RequestContext, optional
            Logging context.

        Raises
        ------
        DataSourceError
            On transport failure, timeout, or any non-200 status.  For status
            failures the message carries the code and the body verbatim.
        ResponseParseError
            When a 200 body is not valid JSON.
        """
        ctx = context or RequestContext(source=self._source_name, method="unknown")
        session = await self._get_session()

        logger.debug(
            "Request [%s.%s] url=%s params=%s", ctx.source, ctx.method, url, ctx.params
        )

        try:
            resp = await session.get(url, params=params)
            # Undecodable bytes become U+FFFD rather than failing the lookup.
            body = await resp.text(errors="replace")
            status = resp.status
        except asyncio.TimeoutError as e:
            logger.warning("Timeout [%s.%s] url=%s", ctx.source, ctx.method, url)
            raise DataSourceError(ctx.source, f"Timeout fetching {url}") from e
        except aiohttp.ClientError as e:
            logger.warning(
                "Connection error [%s.%s] url=%s: %s", ctx.source, ctx.method, url, e
            )
            raise DataSourceError(ctx.source, f"Connection error: {e}") from e

        if status != 200:
            raise DataSourceError(
                ctx.source,
                f"[STATUS CODE - {status}]\t{body}",
                status_code=status,
            )

        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            raise ResponseParseError(
                ctx.source, f"Invalid JSON from {url}: {e}", status_code=status
            ) from e

        logger.debug("Success [%s.%s] url=%s", ctx.source, ctx.method, url)
        return data
