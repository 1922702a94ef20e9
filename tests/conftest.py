"""
Pytest configuration and fixtures for AJIS tests.
"""

import os
import random
import sys
from typing import List, Optional

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ajis.agent import AssistantAgent
from ajis.router import build_router
from common.models import EncyclopediaSummary, MediaRecord


class StubMetadataService:
    """Anime metadata stand-in that records every lookup."""

    def __init__(self, record: Optional[MediaRecord] = None):
        self.record = record
        self.calls: List[str] = []

    async def lookup(self, title: str) -> Optional[MediaRecord]:
        self.calls.append(title)
        return self.record


class StubSummaryService:
    """Encyclopedia stand-in that records every lookup."""

    def __init__(self, extract: Optional[str] = None):
        self.extract = extract
        self.calls: List[str] = []

    async def lookup(self, query: str) -> Optional[EncyclopediaSummary]:
        self.calls.append(query)
        if self.extract is None:
            return None
        return EncyclopediaSummary(title=query, extract=self.extract)


@pytest.fixture
def frieren_record() -> MediaRecord:
    """Metadata record for Frieren."""
    return MediaRecord(
        english_title="Frieren: Beyond Journey's End",
        romaji_title="Sousou no Frieren",
        description="A story about...",
        episode_count=28,
        release_year=2023,
    )


@pytest.fixture
def make_agent():
    """Factory for agents wired to stub collaborators with a seeded RNG."""

    def factory(
        metadata=None,
        summary=None,
        seed: int = 7,
        default_persona: str = "Static",
    ) -> AssistantAgent:
        router = build_router(metadata or StubMetadataService(), summary or StubSummaryService())
        return AssistantAgent(router=router, default_persona=default_persona, rng=random.Random(seed))

    return factory


@pytest.fixture
def make_metadata():
    """Factory for recording metadata stubs."""
    return StubMetadataService


@pytest.fixture
def make_summary():
    """Factory for recording encyclopedia stubs."""
    return StubSummaryService
