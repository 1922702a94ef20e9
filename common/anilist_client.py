"""
AniList Client

Anime metadata lookup against the AniList GraphQL API.
"""

from typing import Dict, Optional

import httpx
import structlog

from .config import ANILIST_URL
from .models import MediaRecord
from .service_client import ServiceClient


logger = structlog.get_logger()


MEDIA_QUERY = """
query ($search: String) {
  Media(search: $search, type: ANIME) {
    title { romaji english }
    description(asHtml: false)
    episodes
    seasonYear
  }
}
"""


class AniListClient(ServiceClient):
    """
    Looks up a single anime by free-text title.

    Any failure (transport error, GraphQL error, no match, malformed
    payload) is reported as ``None``.
    """

    name = "anilist"

    def __init__(
        self,
        base_url: str = ANILIST_URL,
        timeout: float = 10.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        super().__init__(
            base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json", **(headers or {})},
            transport=transport,
        )

    async def lookup(self, title: str) -> Optional[MediaRecord]:
        """Return the best AniList match for ``title``, if any."""
        try:
            response = await self.client.post(
                self.base_url,
                json={"query": MEDIA_QUERY, "variables": {"search": title}},
            )
            payload = response.json()
            media = (payload.get("data") or {}).get("Media")
            if not media:
                logger.info("No AniList match", title=title, status=response.status_code)
                return None
            return MediaRecord.from_anilist(media)

        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logger.warning("AniList lookup failed", title=title, error=str(e))
            return None
