"""
Keyword Intent Classification

Maps free-text requests to one of a closed set of intents using an
ordered keyword table. The first intent (in table order) with any
keyword occurring in the lower-cased text wins; text matching nothing
falls back to INFO.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Mapping, Optional, Sequence, Tuple


class Intent(str, Enum):
    """Supported request intents."""
    RECAP = "recap"
    INFO = "info"
    WHERE = "where"
    SUPPORT = "support"


DEFAULT_INTENT = Intent.INFO


@dataclass(frozen=True)
class IntentTable:
    """Immutable, ordered mapping of intent to keyword phrases."""
    entries: Tuple[Tuple[Intent, Tuple[str, ...]], ...]

    @classmethod
    def from_mapping(cls, mapping: Mapping[Intent, Sequence[str]]) -> "IntentTable":
        """Freeze ``mapping`` keeping its insertion order as precedence."""
        return cls(
            entries=tuple(
                (intent, tuple(keyword.lower() for keyword in keywords))
                for intent, keywords in mapping.items()
            )
        )

    def __iter__(self) -> Iterator[Tuple[Intent, Tuple[str, ...]]]:
        return iter(self.entries)


DEFAULT_INTENT_TABLE = IntentTable.from_mapping({
    Intent.RECAP: ["what happened", "episode", "recap", "summary", "remind me"],
    Intent.INFO: ["what is", "about", "tell me about"],
    Intent.WHERE: ["where can", "watch", "read"],
    Intent.SUPPORT: ["help", "issue", "problem"],
})


@dataclass
class IntentResult:
    """Result of intent detection."""
    intent: Intent
    matched_keyword: Optional[str] = None

    @property
    def is_default(self) -> bool:
        return self.matched_keyword is None


class IntentClassifier:
    """
    Deterministic keyword classifier.

    Precedence is positional: a request matching both a RECAP and an
    INFO keyword is RECAP because RECAP comes first in the table.
    """

    def __init__(
        self,
        table: IntentTable = DEFAULT_INTENT_TABLE,
        default_intent: Intent = DEFAULT_INTENT,
    ):
        self.table = table
        self.default_intent = default_intent

    def detect(self, text: str) -> IntentResult:
        """Classify ``text`` and report which keyword decided it."""
        lowered = text.lower()
        for intent, keywords in self.table:
            for keyword in keywords:
                if keyword in lowered:
                    return IntentResult(intent=intent, matched_keyword=keyword)
        return IntentResult(intent=self.default_intent)

    def classify(self, text: str) -> Intent:
        """Return the intent label for ``text``."""
        return self.detect(text).intent
