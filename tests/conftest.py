from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from guiderbooks.api.app import create_app
from guiderbooks.api.dependencies import (
    get_chapter_store,
    get_completion_client,
    get_optional_chapter_store,
    get_question_store,
)
from guiderbooks.configuration import Settings
from guiderbooks.storage import Chapter, StoredQuestion, to_documents


class InMemoryChapterStore:
    """Chapter store over a list; records every lookup it receives."""

    def __init__(self, chapters=()):
        self.chapters: List[Chapter] = list(chapters)
        self.calls: List[tuple] = []

    async def find_by_key(self, key: str) -> Optional[Chapter]:
        self.calls.append(("key", key))
        return next((c for c in self.chapters if c.key == key), None)

    async def find_by_native_id(self, native_id: ObjectId) -> Optional[Chapter]:
        self.calls.append(("native_id", str(native_id)))
        return next((c for c in self.chapters if c.id == str(native_id)), None)


class InMemoryQuestionStore:
    def __init__(self):
        self.docs: List[Dict[str, Any]] = []

    async def find_by_chapter_key(self, chapter_key: str) -> List[StoredQuestion]:
        return [StoredQuestion.from_document(d) for d in self.docs if d["chapterId"] == chapter_key]

    async def insert_many(self, chapter, chapter_key, items) -> List[StoredQuestion]:
        docs = to_documents(chapter, chapter_key, items)
        for doc in docs:
            doc["_id"] = ObjectId()
        self.docs.extend(docs)
        return [StoredQuestion.from_document(d) for d in docs]


class StubCompletionClient:
    """Returns queued replies (or raises `error`) and records the prompts it saw."""

    def __init__(self, responses=None, error: Optional[Exception] = None):
        self.responses = list(responses or [])
        self.error = error
        self.calls: List[tuple] = []

    async def complete(self, prompt, options=None) -> str:
        self.calls.append((prompt, options))
        if self.error is not None:
            raise self.error
        return self.responses.pop(0) if self.responses else ""


def qa_items(n: int) -> List[Dict[str, str]]:
    return [{"question": f"Question {i}?", "answer": f"Answer {i}"} for i in range(1, n + 1)]


def assessment_payload(n: int = 10) -> Dict[str, List[Any]]:
    return {
        "mcqs": [
            {"question": f"MCQ {i}?", "options": ["A", "B", "C", "D"], "answer": "A"} for i in range(n)
        ],
        "trueFalse": [{"statement": f"Statement {i}", "answer": i % 2 == 0} for i in range(n)],
        "fillups": [{"sentence": f"Plants use _____ ({i})", "answer": "light"} for i in range(n)],
        "qa": [{"question": f"Why {i}?", "answer": "Because"} for i in range(n)],
    }


@pytest.fixture
def chapter() -> Chapter:
    return Chapter(
        id=str(ObjectId()),
        key="bio-ch1",
        title="Photosynthesis",
        content="Photosynthesis is the process by which plants turn light into chemical energy.",
        metadata={"grade": 7, "subject": "biology"},
    )


@pytest.fixture
def chapter_store(chapter) -> InMemoryChapterStore:
    return InMemoryChapterStore([chapter])


@pytest.fixture
def question_store() -> InMemoryQuestionStore:
    return InMemoryQuestionStore()


@pytest.fixture
def completion() -> StubCompletionClient:
    return StubCompletionClient()


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key=None, mongodb_uri=None, max_content_chars=None, log_level="WARNING")


@pytest.fixture
def app(settings, completion, chapter_store, question_store):
    application = create_app(settings)
    application.dependency_overrides[get_completion_client] = lambda: completion
    application.dependency_overrides[get_optional_chapter_store] = lambda: chapter_store
    application.dependency_overrides[get_chapter_store] = lambda: chapter_store
    application.dependency_overrides[get_question_store] = lambda: question_store
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
