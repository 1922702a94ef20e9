"""
AJIS - Adaptive anime assistant

Classifies a request, extracts the title and episode, routes to the
matching handler and formats the reply through a persona.
"""

from .agent import AssistantAgent, AssistantResult, respond
from .entity_extractor import ExtractedEntities, extract_entities, extract_episode, extract_title
from .handlers import HandlerOutcome, OutcomeKind, clean
from .intent_classifier import Intent, IntentClassifier, IntentResult, IntentTable
from .personas import get_persona
from .router import IntentRouter, build_router

__all__ = [
    "AssistantAgent",
    "AssistantResult",
    "respond",
    "ExtractedEntities",
    "extract_entities",
    "extract_episode",
    "extract_title",
    "HandlerOutcome",
    "OutcomeKind",
    "clean",
    "Intent",
    "IntentClassifier",
    "IntentResult",
    "IntentTable",
    "get_persona",
    "IntentRouter",
    "build_router",
]
