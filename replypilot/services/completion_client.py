import logging
from abc import ABC, abstractmethod
from typing import Any

import anthropic
import groq

from replypilot.config import Settings
from replypilot.services.prompt_composer import PromptPair

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "Thank you for your review!"
GENERIC_ERROR = "Internal server error"


class CompletionDispatcher(ABC):
    """
    Sends a PromptPair to a chat-completion provider and returns the reply text.

    The provider client is created once by the caller and reused for every
    request. Provider errors propagate; only an empty completion is replaced
    by FALLBACK_REPLY.
    """

    provider = ""

    def __init__(self, client: Any, model: str, temperature: float = 0.5, max_tokens: int = 256):
        self._client = client
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens

    @property
    def model(self) -> str:
        return self._model

    async def complete(self, prompts: PromptPair) -> str:
        text = await self._create(prompts)
        text = (text or "").strip()
        if not text:
            logger.warning("Empty completion from %s (%s), using fallback reply", self.provider, self._model)
            return FALLBACK_REPLY
        return text

    async def aclose(self) -> None:
        await self._client.close()

    @abstractmethod
    async def _create(self, prompts: PromptPair) -> str | None:
        """Call the provider and return the raw reply text, if any."""


class GroqCompletionDispatcher(CompletionDispatcher):
    provider = "groq"

    async def _create(self, prompts: PromptPair) -> str | None:
        completion = await self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": prompts.system_prompt},
                {"role": "user", "content": prompts.user_prompt},
            ],
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )

        usage = getattr(completion, "usage", None)
        if usage is not None:
            logger.info(
                "Generated reply | model=%s | prompt_tokens=%s | completion_tokens=%s",
                self._model,
                usage.prompt_tokens,
                usage.completion_tokens,
            )

        choices = getattr(completion, "choices", None) or []
        if not choices:
            return None
        message = getattr(choices[0], "message", None)
        return getattr(message, "content", None)


class AnthropicCompletionDispatcher(CompletionDispatcher):
    provider = "anthropic"

    async def _create(self, prompts: PromptPair) -> str | None:
        message = await self._client.messages.create(
            model=self._model,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
            system=prompts.system_prompt,
            messages=[{"role": "user", "content": prompts.user_prompt}],
        )

        usage = getattr(message, "usage", None)
        if usage is not None:
            logger.info(
                "Generated reply | model=%s | input_tokens=%s | output_tokens=%s",
                self._model,
                usage.input_tokens,
                usage.output_tokens,
            )

        for block in getattr(message, "content", None) or []:
            if getattr(block, "type", None) == "text":
                return block.text
        return None


def build_dispatcher(settings: Settings) -> CompletionDispatcher:
    """Create the dispatcher and its provider client for the configured provider."""
    provider = settings.llm_provider.strip().lower()
    if provider == "groq":
        client = groq.AsyncGroq(api_key=settings.groq_api_key or None)
        return GroqCompletionDispatcher(
            client,
            model=settings.model_name,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
        )
    if provider == "anthropic":
        client = anthropic.AsyncAnthropic(api_key=settings.anthropic_api_key or None)
        return AnthropicCompletionDispatcher(
            client,
            model=settings.anthropic_model_name,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
        )
    raise ValueError(f"Unsupported LLM provider: {settings.llm_provider!r}")


def describe_error(exc: BaseException) -> str:
    """
    Best-effort human readable message for a failed provider call.

    Prefers the provider's own error message from the response body, then the
    exception message, then GENERIC_ERROR.
    """
    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        nested = body.get("error")
        if isinstance(nested, dict) and nested.get("message"):
            return str(nested["message"])
        if body.get("message"):
            return str(body["message"])
    message = getattr(exc, "message", None) or str(exc)
    return message or GENERIC_ERROR
