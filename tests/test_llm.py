"""Tests for the LangChain-backed text generator."""

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage

from skillsprint.core.config import Settings
from skillsprint.core.errors import GenerationError, GenerationErrorKind
from skillsprint.generation.llm import LangChainTextGenerator, message_text


@pytest.mark.asyncio
async def test_unconfigured_generator_refuses() -> None:
    generator = LangChainTextGenerator.from_settings(Settings(_env_file=None, GEMINI_API_KEY=None))

    with pytest.raises(GenerationError) as exc_info:
        await generator.generate_text("any prompt")

    assert exc_info.value.kind is GenerationErrorKind.AUTH_CONFIG_INVALID


@pytest.mark.asyncio
async def test_generates_text_from_chat_model() -> None:
    generator = LangChainTextGenerator(FakeListChatModel(responses=['{"title": "Go"}']))

    assert await generator.generate_text("roadmap please") == '{"title": "Go"}'


class TestMessageText:
    """Flattening chat message content."""

    def test_string_content(self):
        assert message_text(AIMessage(content="plain")) == "plain"

    def test_list_content(self):
        """Text parts are joined; non-text parts are skipped."""
        message = AIMessage(
            content=[
                {"type": "text", "text": '{"title": '},
                "\"Go\"",
                {"type": "image_url", "image_url": {"url": "https://example.com/x.png"}},
                {"type": "text", "text": "}"},
            ]
        )
        assert message_text(message) == '{"title": "Go"}'
