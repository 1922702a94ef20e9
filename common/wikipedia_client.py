"""
Wikipedia Client

Generic encyclopedia fallback using the Wikipedia REST page-summary endpoint.
"""

from typing import Optional
from urllib.parse import quote

import httpx
import structlog

from .config import WIKIPEDIA_SUMMARY_URL
from .models import EncyclopediaSummary
from .service_client import ServiceClient


logger = structlog.get_logger()


class WikipediaClient(ServiceClient):
    """Fetches page summaries; anything but a successful JSON reply is ``None``."""

    name = "wikipedia"

    def __init__(self, base_url: str = WIKIPEDIA_SUMMARY_URL, **kwargs):
        super().__init__(base_url, **kwargs)

    def summary_url(self, query: str) -> str:
        return self.base_url + quote(query, safe="")

    async def lookup(self, query: str) -> Optional[EncyclopediaSummary]:
        """Return the page summary for ``query``, if the page exists."""
        try:
            response = await self.client.get(self.summary_url(query), follow_redirects=True)
            if not response.is_success:
                logger.info("No Wikipedia summary", query=query, status=response.status_code)
                return None
            return EncyclopediaSummary.model_validate(response.json())

        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Wikipedia lookup failed", query=query, error=str(e))
            return None
