"""
Completion client
- wraps langchain-openai's ChatOpenAI behind one async `complete` call
- the chat model is built lazily from the API key on first use
- provider failures are translated into domain errors; no retries
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import openai
from langchain_openai import ChatOpenAI
from pydantic import BaseModel, Field

from guiderbooks.errors import (
    ConfigurationError,
    ContentTooLongError,
    GenerationError,
    GuiderbooksError,
    RateLimitError,
)
from guiderbooks.prompts import PromptPair

logger = logging.getLogger(__name__)


class GenerationOptions(BaseModel):
    model: Optional[str] = Field(None, description="Overrides the client's default model.")
    temperature: float = Field(1.0, ge=0.0, le=2.0)
    max_tokens: int = Field(2000, ge=1)
    presence_penalty: float = Field(0.0, ge=-2.0, le=2.0)
    frequency_penalty: float = Field(0.0, ge=-2.0, le=2.0)


# Defaults per request kind
CHAPTER_ANSWER_OPTIONS = GenerationOptions(temperature=1.0, max_tokens=2000, presence_penalty=0.1, frequency_penalty=0.1)
GENERAL_ANSWER_OPTIONS = GenerationOptions(temperature=0.7, max_tokens=1500, presence_penalty=0.1, frequency_penalty=0.1)
QUIZ_OPTIONS = GenerationOptions(temperature=1.0, max_tokens=4000)
ASSESSMENT_OPTIONS = GenerationOptions(temperature=0.7, max_tokens=4000)


def _error_code(exc: Exception) -> Optional[str]:
    code = getattr(exc, "code", None)
    if code:
        return str(code)
    body = getattr(exc, "body", None)
    if isinstance(body, dict):
        err = body.get("error") if isinstance(body.get("error"), dict) else body
        if err.get("code"):
            return str(err["code"])
    return None


def translate_error(exc: Exception) -> GuiderbooksError:
    """Map a provider/transport exception onto the domain error taxonomy."""
    if isinstance(exc, GuiderbooksError):
        return exc
    code = _error_code(exc)
    status = getattr(exc, "status_code", None)
    ctx = {"provider_error": type(exc).__name__, "code": code}

    if code == "insufficient_quota" or status == 429 or isinstance(exc, openai.RateLimitError):
        return RateLimitError(context=ctx)
    if code == "invalid_api_key" or isinstance(exc, openai.AuthenticationError):
        return ConfigurationError("OpenAI API configuration error. Please check your API key.", context=ctx)
    if code == "context_length_exceeded":
        return ContentTooLongError(context=ctx)
    return GenerationError(context=ctx)


def _as_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    # multi-part content: keep only the text blocks
    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class CompletionClient:
    """Sends one prompt pair to the completion service and returns the raw text."""

    def __init__(self, api_key: Optional[str], default_model: str, llm: Optional[Any] = None):
        self._api_key = api_key
        self.default_model = default_model
        self._chat = llm

    def _llm(self):
        if self._chat is None:
            if not self._api_key:
                raise ConfigurationError(
                    "OPENAI_API_KEY is not set. Add it to env/.env or export it."
                )
            # Racing first calls may both build one; either instance is usable.
            self._chat = ChatOpenAI(model=self.default_model, api_key=self._api_key, max_retries=0)
        return self._chat

    async def complete(self, prompt: PromptPair, options: Optional[GenerationOptions] = None) -> str:
        opts = options or GenerationOptions()
        chat = self._llm().bind(
            model=opts.model or self.default_model,
            temperature=opts.temperature,
            max_tokens=opts.max_tokens,
            presence_penalty=opts.presence_penalty,
            frequency_penalty=opts.frequency_penalty,
        )
        try:
            message = await chat.ainvoke(prompt.to_messages())
        except Exception as exc:
            err = translate_error(exc)
            logger.error("Completion call failed (%s): %s", err.error_code, exc)
            raise err from exc
        return _as_text(message.content)
