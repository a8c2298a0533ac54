import asyncio

import httpx
import openai
import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage

from guiderbooks.completion import (
    QUIZ_OPTIONS,
    CompletionClient,
    GenerationOptions,
    translate_error,
)
from guiderbooks.errors import (
    ConfigurationError,
    ContentTooLongError,
    GenerationError,
    RateLimitError,
)
from guiderbooks.prompts import general_answer_prompt

PROMPT = general_answer_prompt("What is a cell?")


def _openai_error(cls, status, code):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    response = httpx.Response(status, request=request)
    return cls("upstream failure", response=response, body={"code": code, "message": "upstream failure"})


class RecordingChat:
    """Minimal chat model double: remembers bound params, replies or raises."""

    def __init__(self, reply="ok", error=None):
        self.reply = reply
        self.error = error
        self.bound = None
        self.messages = None

    def bind(self, **kwargs):
        self.bound = kwargs
        return self

    async def ainvoke(self, messages):
        self.messages = messages
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.reply)


def test_complete_returns_model_text():
    client = CompletionClient(api_key=None, default_model="gpt-test", llm=FakeListChatModel(responses=["A cell is..."]))
    assert asyncio.run(client.complete(PROMPT)) == "A cell is..."


def test_complete_binds_generation_options():
    chat = RecordingChat()
    client = CompletionClient(api_key="sk-test", default_model="gpt-test", llm=chat)
    options = GenerationOptions(temperature=0.3, max_tokens=123, presence_penalty=0.1, frequency_penalty=0.2)
    asyncio.run(client.complete(PROMPT, options))
    assert chat.bound == {
        "model": "gpt-test",
        "temperature": 0.3,
        "max_tokens": 123,
        "presence_penalty": 0.1,
        "frequency_penalty": 0.2,
    }
    assert [m.type for m in chat.messages] == ["system", "human"]


def test_options_model_overrides_default():
    chat = RecordingChat()
    client = CompletionClient(api_key="sk-test", default_model="gpt-test", llm=chat)
    asyncio.run(client.complete(PROMPT, QUIZ_OPTIONS.model_copy(update={"model": "gpt-other"})))
    assert chat.bound["model"] == "gpt-other"
    assert chat.bound["max_tokens"] == 4000


def test_multipart_content_is_flattened():
    chat = RecordingChat(reply=[{"type": "text", "text": "Hello "}, {"type": "text", "text": "world"}])
    client = CompletionClient(api_key="sk-test", default_model="gpt-test", llm=chat)
    assert asyncio.run(client.complete(PROMPT)) == "Hello world"


def test_missing_api_key_fails_on_call_not_on_construction():
    client = CompletionClient(api_key=None, default_model="gpt-test")
    with pytest.raises(ConfigurationError):
        asyncio.run(client.complete(PROMPT))


@pytest.mark.parametrize(
    "error, expected",
    [
        (_openai_error(openai.RateLimitError, 429, "insufficient_quota"), RateLimitError),
        (_openai_error(openai.RateLimitError, 429, "rate_limit_exceeded"), RateLimitError),
        (_openai_error(openai.AuthenticationError, 401, "invalid_api_key"), ConfigurationError),
        (_openai_error(openai.BadRequestError, 400, "context_length_exceeded"), ContentTooLongError),
        (_openai_error(openai.InternalServerError, 500, None), GenerationError),
        (RuntimeError("connection reset"), GenerationError),
    ],
)
def test_provider_errors_are_translated(error, expected):
    client = CompletionClient(api_key="sk-test", default_model="gpt-test", llm=RecordingChat(error=error))
    with pytest.raises(expected) as info:
        asyncio.run(client.complete(PROMPT))
    assert info.value.__cause__ is error


def test_translate_error_messages():
    assert translate_error(_openai_error(openai.RateLimitError, 429, None)).message == (
        "API rate limit exceeded. Please try again later."
    )
    assert translate_error(ValueError("x")).message == "Failed to generate response. Please try again."
    assert translate_error(_openai_error(openai.BadRequestError, 400, "context_length_exceeded")).message == (
        "The content is too long. Please try a shorter question or chapter."
    )
