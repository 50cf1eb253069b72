"""
HTTP client for the image upload API.

Owns one aiohttp session per client, joins paths onto the configured base
URL and hands back the status code together with the decoded JSON body.
Transport errors propagate; the proxy services turn them into error
envelopes.
"""

from typing import Any, Dict, Optional, Tuple
import logging

import aiohttp

from ..config import web_settings

logger = logging.getLogger(__name__)


class ApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.base_url = (base_url or web_settings.API_BASE_URL).rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout or web_settings.API_TIMEOUT_SECONDS)
        self._session = session

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                headers={"Accept": "application/json"},
            )
        return self._session

    async def request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        data: Any = None,
    ) -> Tuple[int, Optional[Any]]:
        """Send a request and return ``(status, body)``; body is None when it is not JSON."""
        session = self._get_session()
        async with session.request(method, self._url(path), json=json, data=data) as response:
            try:
                body = await response.json(content_type=None)
            except ValueError:
                text = await response.text()
                logger.warning(f"Non-JSON response from {method} {path} ({response.status}): {text[:200]}")
                body = None
            return response.status, body

    async def get(self, path: str) -> Tuple[int, Optional[Any]]:
        return await self.request("GET", path)

    async def post(self, path: str, json: Optional[Dict[str, Any]] = None, data: Any = None) -> Tuple[int, Optional[Any]]:
        return await self.request("POST", path, json=json, data=data)

    async def put(self, path: str, json: Optional[Dict[str, Any]] = None) -> Tuple[int, Optional[Any]]:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> Tuple[int, Optional[Any]]:
        return await self.request("DELETE", path)

    async def close(self):
        if self._session is not None and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
