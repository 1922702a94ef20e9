"""
Assistant Agent Implementation

Entry point for the request pipeline. Validates the raw input, detects
the intent, extracts entities, dispatches to the matching handler and
formats the result through a persona.

Flow:
1. Reject anything that is not a non-empty string
2. Classify intent (keyword table)
3. Extract title / episode
4. Dispatch to the intent handler (may await collaborator I/O)
5. Format the handler text with the selected persona
"""

import random
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import structlog

from common.anilist_client import AniListClient
from common.config import Settings
from common.service_client import ServiceClient
from common.wikipedia_client import WikipediaClient

from .entity_extractor import ExtractedEntities, extract_entities
from .handlers import HandlerOutcome, OutcomeKind
from .intent_classifier import IntentClassifier, IntentResult
from .personas import DEFAULT_PERSONA, get_persona
from .router import IntentRouter, build_router


logger = structlog.get_logger()


INVALID_REQUEST_MESSAGE = "Please enter a valid request."


@dataclass
class AssistantResult:
    """Structured outcome of one request, before persona formatting."""
    outcome: HandlerOutcome
    intent_result: Optional[IntentResult] = None
    entities: Optional[ExtractedEntities] = None

    @property
    def text(self) -> str:
        return self.outcome.text


class AssistantAgent:
    """
    Stateless request pipeline.

    Owns the collaborator clients it was built with (if any) so that
    ``connect()``/``disconnect()`` open and close their HTTP sessions.
    """

    def __init__(
        self,
        router: IntentRouter,
        classifier: Optional[IntentClassifier] = None,
        default_persona: str = DEFAULT_PERSONA,
        rng: Optional[random.Random] = None,
        clients: Sequence[ServiceClient] = (),
    ):
        self.router = router
        self.classifier = classifier or IntentClassifier()
        self.default_persona = default_persona
        self.rng = rng or random.Random()
        self.clients = tuple(clients)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AssistantAgent":
        """Build an agent talking to the real AniList and Wikipedia services."""
        headers = {"User-Agent": settings.user_agent}
        anilist = AniListClient(settings.anilist_url, timeout=settings.http_timeout, headers=headers)
        wikipedia = WikipediaClient(
            settings.wikipedia_summary_url,
            timeout=settings.http_timeout,
            headers=headers,
        )
        return cls(
            router=build_router(anilist, wikipedia),
            default_persona=settings.default_persona,
            rng=random.Random(settings.persona_seed),
            clients=(anilist, wikipedia),
        )

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.disconnect()

    async def connect(self):
        for client in self.clients:
            await client.connect()

    async def disconnect(self):
        for client in self.clients:
            await client.disconnect()

    async def process(self, text: Any) -> AssistantResult:
        """Run the pipeline and return the structured outcome."""
        if not isinstance(text, str) or not text:
            logger.info("Rejected invalid request", input_type=type(text).__name__)
            return AssistantResult(
                outcome=HandlerOutcome(OutcomeKind.INVALID_INPUT, INVALID_REQUEST_MESSAGE),
            )

        intent_result = self.classifier.detect(text)
        entities = extract_entities(text)

        logger.info(
            "Intent detected",
            intent=intent_result.intent.value,
            keyword=intent_result.matched_keyword,
            title=entities.title,
            episode=entities.episode,
        )

        outcome = await self.router.dispatch(intent_result.intent, entities)

        logger.info("Request resolved", intent=intent_result.intent.value, outcome=outcome.kind.value)

        return AssistantResult(outcome=outcome, intent_result=intent_result, entities=entities)

    def format(self, result: AssistantResult, persona: Optional[str] = None) -> str:
        """Render the outcome text through the named persona."""
        selected = get_persona(persona or self.default_persona, rng=self.rng, default=self.default_persona)
        return selected.format(result.text)

    async def respond(self, text: Any, persona: Optional[str] = None) -> str:
        """Process ``text`` and return the persona-formatted response."""
        result = await self.process(text)
        return self.format(result, persona)


async def respond(
    text: Any,
    persona: str = DEFAULT_PERSONA,
    settings: Optional[Settings] = None,
) -> str:
    """One-shot helper: open an agent from settings, answer, close it."""
    async with AssistantAgent.from_settings(settings or Settings.from_env()) as agent:
        return await agent.respond(text, persona)
