"""
aiohttp based transport.
"""

import asyncio
import logging
from typing import Mapping, Optional

import aiohttp

from ..auth.errors import NetworkError
from ..core.config import HTTPConfig
from .base import Fields, HTTPResponse, Transport

logger = logging.getLogger(__name__)


class AiohttpTransport(Transport):
    """Transport backed by an aiohttp ClientSession."""

    def __init__(
        self,
        config: Optional[HTTPConfig] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.config = config or HTTPConfig()
        self.config.validate()
        self._session = session
        self._owns_session = session is None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.config.timeout.total_seconds()),
                headers={"User-Agent": self.config.user_agent},
            )
            self._owns_session = True
        return self._session

    async def post(
        self,
        url: str,
        fields: Fields,
        params: Optional[Fields] = None,
        files: Optional[Mapping[str, str]] = None,
    ) -> HTTPResponse:
        if files:
            data = aiohttp.FormData()
            for name, value in fields.items():
                data.add_field(name, value)
            handles = []
            try:
                for name, path in files.items():
                    handle = open(path, "rb")
                    handles.append(handle)
                    data.add_field(name, handle)
                return await self._request("POST", url, params=params, data=data)
            finally:
                for handle in handles:
                    handle.close()

        return await self._request("POST", url, params=params, data=dict(fields))

    async def get(self, url: str, params: Optional[Fields] = None) -> HTTPResponse:
        return await self._request("GET", url, params=params)

    async def _request(self, method: str, url: str, **kwargs) -> HTTPResponse:
        logger.debug(f"{method} {url}")
        session = self._get_session()
        try:
            async with session.request(method, url, **kwargs) as response:
                body = await response.read()
                return HTTPResponse(
                    status_code=response.status,
                    body=body,
                    headers=dict(response.headers),
                )
        except asyncio.TimeoutError as e:
            raise NetworkError(f"Request to {url} timed out", {"url": url}) from e
        except aiohttp.ClientError as e:
            raise NetworkError(f"Request to {url} failed: {e}", {"url": url}) from e

    async def close(self) -> None:
        """Close the session if this transport created it."""
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None
