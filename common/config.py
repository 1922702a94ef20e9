"""
Runtime configuration for the AJIS assistant.

Values come from the environment (optionally seeded from a .env file).
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel


VERSION = "0.2.0"

ANILIST_URL = "https://graphql.anilist.co"
WIKIPEDIA_SUMMARY_URL = "https://en.wikipedia.org/api/rest_v1/page/summary/"


class Settings(BaseModel):
    """Settings shared by the collaborator clients, the agent and the server."""
    anilist_url: str = ANILIST_URL
    wikipedia_summary_url: str = WIKIPEDIA_SUMMARY_URL
    http_timeout: float = 10.0
    user_agent: str = f"ajis/{VERSION}"
    default_persona: str = "Static"
    persona_seed: Optional[int] = None
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8001

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables."""
        load_dotenv()

        seed = os.getenv("PERSONA_SEED")

        return cls(
            anilist_url=os.getenv("ANILIST_URL", ANILIST_URL),
            wikipedia_summary_url=os.getenv("WIKIPEDIA_SUMMARY_URL", WIKIPEDIA_SUMMARY_URL),
            http_timeout=float(os.getenv("HTTP_TIMEOUT", "10.0")),
            user_agent=os.getenv("USER_AGENT", f"ajis/{VERSION}"),
            default_persona=os.getenv("DEFAULT_PERSONA", "Static"),
            persona_seed=int(seed) if seed else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            host=os.getenv("AJIS_HOST", "0.0.0.0"),
            port=int(os.getenv("AJIS_PORT", "8001")),
        )
