"""
Text generation seam for the briefing workflow.

Every collaborator talks to the language model through `TextGenerator`:
one prompt in, generated text out, or an exception. `AutoGenTextGenerator`
is the production implementation built on Microsoft AutoGen with an
OpenAI-compatible chat completion client.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Protocol

from autogen_agentchat.agents import AssistantAgent
from autogen_agentchat.messages import BaseChatMessage
from autogen_core.models import ChatCompletionClient, ModelInfo
from autogen_ext.models.openai import OpenAIChatCompletionClient

from .prompts import BRIEFING_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str:
        ...


@dataclass(slots=True)
class GenerationOutcome:
    """Result of one generator call: either text or the error that replaced it."""

    text: Optional[str] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.text is not None

    def text_or(self, default: str) -> str:
        return self.text if self.ok else default


async def attempt(generator: TextGenerator, prompt: str, *, purpose: str) -> GenerationOutcome:
    """Await one generation and capture any failure instead of raising it."""

    try:
        text = await generator.generate(prompt)
    except Exception as exc:
        logger.exception("Error while %s: %s", purpose, exc)
        return GenerationOutcome(error=exc)
    logger.debug("Raw output while %s: %s", purpose, text)
    return GenerationOutcome(text=text)


class AutoGenTextGenerator:
    """Runs each prompt through a fresh AutoGen assistant with no tools."""

    def __init__(
        self,
        *,
        api_key: str = "",
        openai_model_name: str = "gpt-5-nano",
        base_url: str = "https://api.openai.com/v1",
        temperature: Optional[float] = None,
        system_message: str = BRIEFING_SYSTEM_PROMPT,
        model_client: Optional[ChatCompletionClient] = None,
    ) -> None:
        self._system_message = system_message
        self._model_client = model_client or self._build_openai_client(
            api_key=api_key,
            openai_model_name=openai_model_name,
            base_url=base_url,
            temperature=temperature,
        )
        logger.info("Initialised text generator with model '%s'", openai_model_name)

    async def generate(self, prompt: str) -> str:
        # A new assistant per call so concurrent prompts never share history.
        assistant = AssistantAgent(
            name="briefing_assistant",
            model_client=self._model_client,
            system_message=self._system_message,
            description="Answers a single briefing prompt.",
        )
        result = await assistant.run(task=prompt)
        return self._extract_text(result.messages)

    async def close(self) -> None:
        await self._model_client.close()

    def _extract_text(self, messages: Iterable[Any]) -> str:
        last = self._last_chat_message(messages)
        return last.to_text()

    @staticmethod
    def _last_chat_message(messages: Iterable[Any]) -> BaseChatMessage:
        for message in reversed(list(messages)):
            if isinstance(message, BaseChatMessage):
                return message
        raise RuntimeError("Briefing assistant did not produce a chat response.")

    @staticmethod
    def _build_openai_client(
        *,
        api_key: str,
        openai_model_name: str,
        base_url: str,
        temperature: Optional[float],
    ) -> ChatCompletionClient:
        model_info: ModelInfo = {
            "vision": False,
            "function_calling": False,
            "json_output": False,
            "structured_output": False,
            "family": "openai",
        }
        client_kwargs: Dict[str, Any] = {
            "model": openai_model_name,
            "api_key": api_key,
            "base_url": base_url,
            "include_name_in_message": False,
            "model_info": model_info,
        }
        if temperature is not None:
            client_kwargs["temperature"] = temperature
        return OpenAIChatCompletionClient(**client_kwargs)
