"""
End-to-end tests for the assistant pipeline with stub collaborators.
"""

import pytest
from ajis.agent import INVALID_REQUEST_MESSAGE, AssistantAgent, AssistantResult
from ajis.handlers import OutcomeKind
from ajis.intent_classifier import Intent
from ajis.personas import STATIC_TONE_LINES
from common.anilist_client import AniListClient
from common.config import Settings
from common.wikipedia_client import WikipediaClient


@pytest.mark.asyncio
class TestAssistantProcess:
    """Tests for structured outcomes."""

    async def test_info_uses_metadata_record(self, make_agent, make_metadata, make_summary, frieren_record):
        metadata = make_metadata(frieren_record)
        summary = make_summary(extract="unused")
        agent = make_agent(metadata=metadata, summary=summary)

        result = await agent.process("what is Frieren")

        assert isinstance(result, AssistantResult)
        assert result.intent_result.intent == Intent.INFO
        assert result.outcome.kind == OutcomeKind.ANSWER
        assert result.text.startswith("Frieren: Beyond Journey's End (2023) has 28 episodes.")
        assert metadata.calls == ["what is Frieren"]
        assert summary.calls == []

    async def test_recap_without_title(self, make_agent):
        result = await make_agent().process("recap")

        assert result.intent_result.intent == Intent.RECAP
        assert result.outcome.kind == OutcomeKind.MISSING_ENTITY
        assert result.text == "Which series are you referring to?"

    async def test_recap_with_title_and_episode(self, make_agent, make_summary):
        summary = make_summary(extract="Spike and Jet chase a bounty.")
        agent = make_agent(summary=summary)

        result = await agent.process("recap Cowboy Bebop episode 5")

        assert result.entities.title == "Cowboy Bebop"
        assert result.entities.episode == 5
        assert result.text == "Spike and Jet chase a bounty."
        assert summary.calls == ["Cowboy Bebop episode 5"]

    async def test_support(self, make_agent):
        result = await make_agent().process("help")

        assert result.intent_result.intent == Intent.SUPPORT
        assert result.text == "Describe the issue you are experiencing and I will try to help."

    async def test_where(self, make_agent):
        result = await make_agent().process("watch Mushishi")

        assert result.intent_result.intent == Intent.WHERE
        assert result.text.endswith("streaming or reading options for Mushishi.")

    async def test_info_not_found(self, make_agent):
        result = await make_agent().process("Zzyzx")

        assert result.intent_result.is_default
        assert result.outcome.kind == OutcomeKind.UNAVAILABLE
        assert result.text == "I could not find information on Zzyzx."

    async def test_invalid_input(self, make_agent, make_metadata):
        metadata = make_metadata()
        agent = make_agent(metadata=metadata)

        for bad in ["", None, 42, ["recap"], b"help"]:
            result = await agent.process(bad)
            assert result.outcome.kind == OutcomeKind.INVALID_INPUT, f"Failed for: {bad!r}"
            assert result.text == INVALID_REQUEST_MESSAGE
            assert result.intent_result is None
            assert result.entities is None

        assert metadata.calls == []


@pytest.mark.asyncio
class TestAssistantRespond:
    """Tests for persona-formatted responses."""

    async def test_steele_returns_plain_text(self, make_agent):
        response = await make_agent().respond("help", persona="Steele")
        assert response == "Describe the issue you are experiencing and I will try to help."

    async def test_default_persona_is_static(self, make_agent):
        response = await make_agent().respond("")

        core, line = response.split("\n\n")
        assert core == INVALID_REQUEST_MESSAGE
        assert line in STATIC_TONE_LINES

    async def test_unknown_persona_falls_back_to_default(self, make_agent):
        response = await make_agent().respond("help", persona="Nobody")
        assert response.split("\n\n")[1] in STATIC_TONE_LINES

    async def test_unknown_persona_uses_configured_default(self, make_agent):
        agent = make_agent(default_persona="Steele")

        response = await agent.respond("help", persona="Nobody")

        assert response == "Describe the issue you are experiencing and I will try to help."

    async def test_configured_default_applies_without_persona(self, make_agent):
        response = await make_agent(default_persona="Steele").respond("help")
        assert response == "Describe the issue you are experiencing and I will try to help."

    async def test_same_seed_same_response(self, make_agent):
        first = [await make_agent(seed=11).respond("recap") for _ in range(3)]
        second = [await make_agent(seed=11).respond("recap") for _ in range(3)]
        assert first == second


class TestFromSettings:
    """Tests for building an agent against the real services."""

    def test_from_settings_wires_clients(self):
        settings = Settings(
            anilist_url="https://anilist.test/graphql",
            wikipedia_summary_url="https://wiki.test/summary/",
            http_timeout=3.0,
            default_persona="Steele",
            persona_seed=5,
        )
        agent = AssistantAgent.from_settings(settings)

        anilist, wikipedia = agent.clients
        assert isinstance(anilist, AniListClient)
        assert isinstance(wikipedia, WikipediaClient)
        assert anilist.base_url == "https://anilist.test/graphql"
        assert wikipedia.base_url == "https://wiki.test/summary/"
        assert anilist.timeout == 3.0
        assert anilist.headers["User-Agent"] == settings.user_agent
        assert agent.default_persona == "Steele"
