"""
Collaborator Data Models

Typed views over the payloads returned by the external information
services (AniList for anime metadata, Wikipedia for page summaries).
"""

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict


# =============================================================================
# Anime Metadata
# =============================================================================

class MediaRecord(BaseModel):
    """
    A single anime entry from the metadata service.
    Every field may be missing; AniList returns nulls freely.
    """
    english_title: Optional[str] = None
    romaji_title: Optional[str] = None
    description: Optional[str] = None
    episode_count: Optional[int] = None
    release_year: Optional[int] = None

    @property
    def display_name(self) -> Optional[str]:
        """English title when present, otherwise the romanized one."""
        return self.english_title or self.romaji_title

    @classmethod
    def from_anilist(cls, media: Dict[str, Any]) -> "MediaRecord":
        """Build a record from an AniList ``Media`` object."""
        title = media.get("title") or {}
        return cls(
            english_title=title.get("english"),
            romaji_title=title.get("romaji"),
            description=media.get("description"),
            episode_count=media.get("episodes"),
            release_year=media.get("seasonYear"),
        )


# =============================================================================
# Encyclopedia Summary
# =============================================================================

class EncyclopediaSummary(BaseModel):
    """Page summary from the encyclopedia service."""
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    extract: Optional[str] = None
