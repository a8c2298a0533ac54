"""FastAPI dependencies for the shared clients kept on app.state."""

from typing import Optional

from fastapi import Request

from guiderbooks.completion import CompletionClient
from guiderbooks.configuration import Settings
from guiderbooks.errors import StoreUnavailableError
from guiderbooks.storage import ChapterStore, QuestionStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_completion_client(request: Request) -> CompletionClient:
    return request.app.state.completion_client


def get_optional_chapter_store(request: Request) -> Optional[ChapterStore]:
    return getattr(request.app.state, "chapter_store", None)


def get_chapter_store(request: Request) -> ChapterStore:
    store = get_optional_chapter_store(request)
    if store is None:
        raise StoreUnavailableError()
    return store


def get_question_store(request: Request) -> QuestionStore:
    store = getattr(request.app.state, "question_store", None)
    if store is None:
        raise StoreUnavailableError()
    return store
