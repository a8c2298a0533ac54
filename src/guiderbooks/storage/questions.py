"""
Question storage
- find stored questions by the chapter key they were requested with
- bulk insert generated questions (no transaction, not idempotent)
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field

from .chapters import Chapter, parse_native_id


class StoredQuestion(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    question: str
    answer: str
    chapter: Optional[str] = Field(None, description="Native id of the owning chapter.")
    chapter_id: Optional[str] = Field(None, alias="chapterId", description="Chapter key as requested.")

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "StoredQuestion":
        chapter_ref = doc.get("chapter")
        return cls(
            id=str(doc["_id"]),
            question=str(doc.get("question") or ""),
            answer=str(doc.get("answer") or ""),
            chapter=str(chapter_ref) if chapter_ref is not None else None,
            chapter_id=doc.get("chapterId"),
        )


class QuestionStore(Protocol):
    async def find_by_chapter_key(self, chapter_key: str) -> List[StoredQuestion]: ...

    async def insert_many(
        self, chapter: Chapter, chapter_key: str, items: List[Dict[str, str]]
    ) -> List[StoredQuestion]: ...


def to_documents(chapter: Chapter, chapter_key: str, items: List[Dict[str, str]]) -> List[Dict[str, Any]]:
    """Attach both chapter references to each question/answer pair."""
    chapter_ref = parse_native_id(chapter.id) or chapter.id
    return [
        {
            "question": item["question"],
            "answer": item["answer"],
            "chapter": chapter_ref,
            "chapterId": chapter_key,
        }
        for item in items
    ]


class MongoQuestionStore:
    def __init__(self, collection):
        self._collection = collection

    async def find_by_chapter_key(self, chapter_key: str) -> List[StoredQuestion]:
        cursor = self._collection.find({"chapterId": chapter_key}).sort("_id", 1)
        return [StoredQuestion.from_document(doc) async for doc in cursor]

    async def insert_many(
        self, chapter: Chapter, chapter_key: str, items: List[Dict[str, str]]
    ) -> List[StoredQuestion]:
        docs = to_documents(chapter, chapter_key, items)
        if not docs:
            return []
        # insert_many sets `_id` on each document in place
        await self._collection.insert_many(docs)
        return [StoredQuestion.from_document(doc) for doc in docs]
