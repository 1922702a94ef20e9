"""
HTTP Service Client Base

Connection handling shared by the external information service clients.
"""

from typing import Dict, Optional

import httpx
import structlog


logger = structlog.get_logger()


class ServiceClient:
    """
    Owns a single ``httpx.AsyncClient`` for one upstream service.

    Use as an async context manager, or call ``connect()`` and
    ``disconnect()`` explicitly.
    """

    name = "service"

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.headers = headers or {}
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.disconnect()

    async def connect(self):
        """Initialize the HTTP client."""
        if self._client:
            return
        self._client = httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            headers=self.headers,
            transport=self.transport,
        )
        logger.debug("Connected service client", service=self.name, url=self.base_url)

    async def disconnect(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.debug("Disconnected service client", service=self.name)

    @property
    def client(self) -> httpx.AsyncClient:
        if not self._client:
            raise RuntimeError("Client not connected. Call connect() first or use async context manager.")
        return self._client
