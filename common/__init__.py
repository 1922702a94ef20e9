"""
Shared configuration, logging and external service clients.
"""

from .anilist_client import AniListClient
from .config import Settings, VERSION
from .models import EncyclopediaSummary, MediaRecord
from .service_client import ServiceClient
from .wikipedia_client import WikipediaClient

__all__ = [
    "AniListClient",
    "Settings",
    "VERSION",
    "EncyclopediaSummary",
    "MediaRecord",
    "ServiceClient",
    "WikipediaClient",
]
