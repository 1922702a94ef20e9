"""Title and episode extraction from free-text requests."""

import re
from dataclasses import dataclass
from typing import Optional

EPISODE_PATTERN = re.compile(r"episode\s*([0-9]+)", re.IGNORECASE)

# Alternation order matters: "tell me about" must be tried before "about".
TITLE_NOISE_PHRASES = (
    "what happened",
    "recap",
    "summary",
    "tell me about",
    "about",
    "watch",
    "read",
)
TITLE_NOISE_PATTERN = re.compile(
    "|".join(re.escape(phrase) for phrase in TITLE_NOISE_PHRASES),
    re.IGNORECASE,
)


@dataclass(frozen=True)
class ExtractedEntities:
    title: str = ""
    episode: Optional[int] = None

    @property
    def has_title(self) -> bool:
        return bool(self.title)


def extract_episode(text: str) -> Optional[int]:
    """Episode number from the first "episode <digits>" mention, if any."""
    match = EPISODE_PATTERN.search(text)
    if match:
        return int(match.group(1))
    return None


def extract_title(text: str) -> str:
    """
    Whatever is left after dropping the episode marker and request phrases.

    Lossy by construction: a title that itself contains one of the
    noise phrases loses that part.
    """
    remainder = EPISODE_PATTERN.sub("", text, count=1)
    remainder = TITLE_NOISE_PATTERN.sub("", remainder)
    return remainder.strip()


def extract_entities(text: str) -> ExtractedEntities:
    return ExtractedEntities(title=extract_title(text), episode=extract_episode(text))
