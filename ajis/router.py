"""Intent router dispatching extracted entities to registered handlers."""

from typing import Iterable, Mapping, MutableMapping, Optional

import structlog

from .entity_extractor import ExtractedEntities
from .handlers import (
    AnimeMetadataService,
    EncyclopediaSummaryService,
    HandlerOutcome,
    InfoHandler,
    IntentHandler,
    RecapHandler,
    SupportHandler,
    WhereHandler,
)
from .intent_classifier import DEFAULT_INTENT, Intent


logger = structlog.get_logger()


class IntentRouterError(RuntimeError):
    """Base error for router failures."""


class IntentHandlerNotFoundError(IntentRouterError):
    """Raised when neither the intent nor the default intent has a handler."""


class IntentRouter:
    """Dispatch intents to registered handlers."""

    def __init__(
        self,
        handlers: Optional[Iterable[IntentHandler]] = None,
        default_intent: Intent = DEFAULT_INTENT,
    ) -> None:
        self._handlers: MutableMapping[Intent, IntentHandler] = {}
        self.default_intent = default_intent
        for handler in handlers or ():
            self.register(handler)

    def register(self, handler: IntentHandler) -> None:
        """Register or replace the handler for ``handler.intent``."""
        self._handlers[handler.intent] = handler

    def unregister(self, intent: Intent) -> None:
        self._handlers.pop(intent, None)

    def handlers(self) -> Mapping[Intent, IntentHandler]:
        return dict(self._handlers)

    def resolve(self, intent: Intent) -> IntentHandler:
        """Handler for ``intent``, falling back to the default intent's handler."""
        handler = self._handlers.get(intent) or self._handlers.get(self.default_intent)
        if handler is None:
            raise IntentHandlerNotFoundError(
                f"No handler registered for intent {intent} or default {self.default_intent}"
            )
        return handler

    async def dispatch(self, intent: Intent, entities: ExtractedEntities) -> HandlerOutcome:
        """Invoke the handler for ``intent`` with the extracted entities."""
        handler = self.resolve(intent)
        logger.debug(
            "Dispatching",
            intent=intent.value,
            handler=type(handler).__name__,
            title=entities.title,
            episode=entities.episode,
        )
        return await handler.handle(entities)


def build_router(
    metadata_service: AnimeMetadataService,
    summary_service: EncyclopediaSummaryService,
) -> IntentRouter:
    """Router wired with the standard handler for every intent."""
    return IntentRouter([
        RecapHandler(summary_service),
        InfoHandler(metadata_service, summary_service),
        WhereHandler(),
        SupportHandler(),
    ])
