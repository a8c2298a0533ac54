"""
Chapter lookup.

Chapters can be addressed by a human-assigned key (the `chapterId` field) or by
the MongoDB `_id`. `resolve_chapter` tries the key first and only then the native
id, returning a tagged Found/NotFound result instead of raising.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Protocol, Union

from bson import ObjectId
from pydantic import BaseModel, Field

from .db import to_jsonable


class Chapter(BaseModel):
    id: str = Field(..., description="Store-native identifier, stringified.")
    key: Optional[str] = Field(None, description="Human-assigned chapter key.")
    title: str = ""
    content: str = ""
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Chapter":
        key = doc.get("chapterId")
        metadata = doc.get("metadata")
        return cls(
            id=str(doc["_id"]),
            key=str(key) if key is not None else None,
            title=str(doc.get("title") or ""),
            content=str(doc.get("content") or ""),
            metadata=to_jsonable(metadata) if isinstance(metadata, dict) else {},
        )


class ChapterStore(Protocol):
    async def find_by_key(self, key: str) -> Optional[Chapter]: ...

    async def find_by_native_id(self, native_id: ObjectId) -> Optional[Chapter]: ...


class MongoChapterStore:
    """Read-only access to the `chapters` collection."""

    def __init__(self, collection):
        self._collection = collection

    async def find_by_key(self, key: str) -> Optional[Chapter]:
        doc = await self._collection.find_one({"chapterId": key})
        return Chapter.from_document(doc) if doc else None

    async def find_by_native_id(self, native_id: ObjectId) -> Optional[Chapter]:
        doc = await self._collection.find_one({"_id": native_id})
        return Chapter.from_document(doc) if doc else None


# ---------------- Resolution ----------------

@dataclass(frozen=True)
class Found:
    chapter: Chapter
    matched_by: Literal["key", "native_id"]


@dataclass(frozen=True)
class NotFound:
    identifier: str


ChapterLookup = Union[Found, NotFound]


def parse_native_id(identifier: str) -> Optional[ObjectId]:
    """ObjectId for a well-formed identifier, else None."""
    if isinstance(identifier, str) and ObjectId.is_valid(identifier):
        return ObjectId(identifier)
    return None


async def resolve_chapter(store: ChapterStore, identifier: Optional[str]) -> ChapterLookup:
    ident = (identifier or "").strip()
    if not ident:
        return NotFound(identifier or "")

    chapter = await store.find_by_key(ident)
    if chapter is not None:
        return Found(chapter, "key")

    native_id = parse_native_id(ident)
    if native_id is None:
        return NotFound(ident)

    chapter = await store.find_by_native_id(native_id)
    if chapter is not None:
        return Found(chapter, "native_id")
    return NotFound(ident)
