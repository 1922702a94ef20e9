"""
Intent Handlers

One handler per intent, each exposing ``async handle(entities)``.
Handlers never raise for user-facing problems; missing entities and
missing information come back as tagged ``HandlerOutcome`` values.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

import structlog

from common.models import EncyclopediaSummary, MediaRecord

from .entity_extractor import ExtractedEntities
from .intent_classifier import Intent


logger = structlog.get_logger()


MAX_TEXT_LENGTH = 400
TAG_PATTERN = re.compile(r"<[^>]+>")


class OutcomeKind(str, Enum):
    """How a request was resolved."""
    ANSWER = "answer"
    INVALID_INPUT = "invalid_input"
    MISSING_ENTITY = "missing_entity"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class HandlerOutcome:
    kind: OutcomeKind
    text: str

    @classmethod
    def answer(cls, text: str) -> "HandlerOutcome":
        return cls(OutcomeKind.ANSWER, text)

    @classmethod
    def missing(cls, text: str) -> "HandlerOutcome":
        return cls(OutcomeKind.MISSING_ENTITY, text)

    @classmethod
    def unavailable(cls, text: str) -> "HandlerOutcome":
        return cls(OutcomeKind.UNAVAILABLE, text)


def clean(text: Optional[str], limit: int = MAX_TEXT_LENGTH) -> str:
    """Strip markup tags and cap the length of collaborator text."""
    if not text:
        return ""
    return TAG_PATTERN.sub("", text)[:limit]


# =============================================================================
# Collaborator contracts
# =============================================================================

class AnimeMetadataService(Protocol):
    async def lookup(self, title: str) -> Optional[MediaRecord]: ...


class EncyclopediaSummaryService(Protocol):
    async def lookup(self, query: str) -> Optional[EncyclopediaSummary]: ...


# =============================================================================
# Handlers
# =============================================================================

class IntentHandler(ABC):
    """Base class for intent handlers."""

    intent: Intent

    @abstractmethod
    async def handle(self, entities: ExtractedEntities) -> HandlerOutcome:
        pass


class RecapHandler(IntentHandler):
    """Episode recap via the encyclopedia service."""

    intent = Intent.RECAP

    def __init__(self, summary_service: EncyclopediaSummaryService):
        self.summary_service = summary_service

    async def handle(self, entities: ExtractedEntities) -> HandlerOutcome:
        title, episode = entities.title, entities.episode
        if not entities.has_title:
            return HandlerOutcome.missing("Which series are you referring to?")
        if not episode:
            return HandlerOutcome.missing(f"Which episode of {title} would you like a recap for?")

        summary = await self.summary_service.lookup(f"{title} episode {episode}")
        if summary and summary.extract:
            return HandlerOutcome.answer(clean(summary.extract))

        logger.info("Recap not found", title=title, episode=episode)
        return HandlerOutcome.unavailable(f"A recap for {title} Episode {episode} could not be found.")


class InfoHandler(IntentHandler):
    """
    Title information with a two-tier fallback.

    The anime metadata service is always asked first; the encyclopedia
    is only consulted when it has nothing.
    """

    intent = Intent.INFO

    def __init__(
        self,
        metadata_service: AnimeMetadataService,
        summary_service: EncyclopediaSummaryService,
    ):
        self.metadata_service = metadata_service
        self.summary_service = summary_service

    async def handle(self, entities: ExtractedEntities) -> HandlerOutcome:
        title = entities.title
        if not entities.has_title:
            return HandlerOutcome.missing("What title would you like information on?")

        record = await self.metadata_service.lookup(title)
        if record:
            return HandlerOutcome.answer(describe_media(record, fallback_title=title))

        summary = await self.summary_service.lookup(title)
        if summary and summary.extract:
            return HandlerOutcome.answer(clean(summary.extract))

        logger.info("No information found", title=title)
        return HandlerOutcome.unavailable(f"I could not find information on {title}.")


def describe_media(record: MediaRecord, fallback_title: str = "This title") -> str:
    """One-sentence summary of ``record``; untitled records use ``fallback_title``."""
    name = record.display_name or fallback_title
    year = record.release_year if record.release_year is not None else "unknown year"
    episodes = record.episode_count or "an unknown number of"
    sentence = f"{name} ({year}) has {episodes} episodes. {clean(record.description)}"
    return sentence.rstrip()


class WhereHandler(IntentHandler):
    intent = Intent.WHERE

    async def handle(self, entities: ExtractedEntities) -> HandlerOutcome:
        if not entities.has_title:
            return HandlerOutcome.missing("What title are you trying to find?")
        return HandlerOutcome.answer(
            "Availability varies by region. "
            f"Let me know if you want streaming or reading options for {entities.title}."
        )


class SupportHandler(IntentHandler):
    intent = Intent.SUPPORT

    async def handle(self, entities: ExtractedEntities) -> HandlerOutcome:
        return HandlerOutcome.answer("Describe the issue you are experiencing and I will try to help.")
