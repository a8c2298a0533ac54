"""Storage package: MongoDB connection plus chapter/question stores."""
from .db import Database, connect, to_jsonable
from .chapters import (
    Chapter,
    ChapterLookup,
    ChapterStore,
    Found,
    MongoChapterStore,
    NotFound,
    parse_native_id,
    resolve_chapter,
)
from .questions import MongoQuestionStore, QuestionStore, StoredQuestion, to_documents

__all__ = [
    "Database",
    "connect",
    "to_jsonable",
    "Chapter",
    "ChapterLookup",
    "ChapterStore",
    "Found",
    "MongoChapterStore",
    "NotFound",
    "parse_native_id",
    "resolve_chapter",
    "MongoQuestionStore",
    "QuestionStore",
    "StoredQuestion",
    "to_documents",
]
