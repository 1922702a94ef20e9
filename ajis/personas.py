"""
Response Personas

Presentation wrappers applied to the plain response text.
"""

import random
from abc import ABC, abstractmethod
from typing import Optional, Sequence


DEFAULT_PERSONA = "Static"

STATIC_TONE_LINES = (
    "That’s where it all begins.",
    "This sets the foundation for everything after.",
    "This moment defines the series early on.",
    "From here, things escalate quickly.",
)


class Persona(ABC):
    name: str

    @abstractmethod
    def format(self, core: str) -> str:
        pass


class StaticPersona(Persona):
    """Appends one tone line, picked at random, after a blank line."""

    name = "Static"

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        tone_lines: Sequence[str] = STATIC_TONE_LINES,
    ):
        self.rng = rng or random.Random()
        self.tone_lines = tuple(tone_lines)

    def format(self, core: str) -> str:
        line = self.rng.choice(self.tone_lines)
        return f"{core}\n\n{line}"


class SteelePersona(Persona):
    """Plain delivery; the response is returned untouched."""

    name = "Steele"

    def format(self, core: str) -> str:
        return core


PERSONAS = {
    StaticPersona.name: StaticPersona,
    SteelePersona.name: SteelePersona,
}


def get_persona(
    name: Optional[str] = DEFAULT_PERSONA,
    rng: Optional[random.Random] = None,
    default: str = DEFAULT_PERSONA,
) -> Persona:
    """
    Resolve a persona by exact, case-sensitive name.

    Unrecognized names (including ``None``) resolve to ``default``; an
    unrecognized ``default`` resolves to Static.
    """
    persona_cls = PERSONAS.get(name) or PERSONAS.get(default, StaticPersona)
    if persona_cls is StaticPersona:
        return StaticPersona(rng=rng)
    return persona_cls()
