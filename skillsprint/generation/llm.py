"""LLM provider configuration."""

from typing import Any, Protocol

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from skillsprint.core.config import Settings
from skillsprint.core.errors import GenerationError, GenerationErrorKind
from skillsprint.core.logging import get_logger

logger = get_logger(__name__)


class TextGenerator(Protocol):
    """Capability that turns a prompt into free-form text."""

    async def generate_text(self, prompt: str) -> str: ...


def build_llm(settings: Settings) -> ChatGoogleGenerativeAI:
    """Get configured LLM instance."""
    logger.info("Initializing LLM", model=settings.GEMINI_MODEL)
    return ChatGoogleGenerativeAI(
        model=settings.GEMINI_MODEL,
        google_api_key=settings.GEMINI_API_KEY,
        temperature=settings.GEMINI_TEMPERATURE,
        # Failures surface to the caller immediately.
        max_retries=0,
    )


def message_text(message: BaseMessage) -> str:
    """Flatten a chat message's content into plain text."""
    content: Any = message.content
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type", "text") == "text":
            parts.append(str(part.get("text", "")))
    return "".join(parts)


class LangChainTextGenerator:
    """Text generator backed by a LangChain chat model.

    Without a model (no API key configured) every call fails as a credential
    problem rather than reaching the network.
    """

    def __init__(self, llm: BaseChatModel | None) -> None:
        self._llm = llm

    @classmethod
    def from_settings(cls, settings: Settings) -> "LangChainTextGenerator":
        if not settings.gemini_configured:
            logger.warning("GEMINI_API_KEY is not configured; roadmap generation disabled")
            return cls(None)
        return cls(build_llm(settings))

    async def generate_text(self, prompt: str) -> str:
        if self._llm is None:
            raise GenerationError(
                GenerationErrorKind.AUTH_CONFIG_INVALID,
                "GEMINI_API_KEY is not configured",
            )
        response = await self._llm.ainvoke([HumanMessage(content=prompt)])
        return message_text(response)
