"""Request and response models for the tutor (Q&A) endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .chapters import ChapterContent


class AskChapterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question: Optional[str] = Field(None, description="Question about the chapter.")
    chapter_id: Optional[str] = Field(None, alias="chapterId", description="Chapter key or native id.")
    chapter_content: Optional[ChapterContent] = Field(
        None,
        alias="chapterContent",
        description="Inline chapter material; skips the store lookup when it has content.",
    )
    language: Optional[str] = Field(None, description="Preferred answer language.")


class AskChapterResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    answer: str
    chapter_title: str = Field(..., alias="chapterTitle")
    question: str
    timestamp: datetime


class AskRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    question: Optional[str] = Field(None, description="Free-form question.")
    chapter_id: Optional[str] = Field(
        None, alias="chapterId", description="Optional chapter whose content becomes the context."
    )
    context: Optional[str] = Field(None, description="Free-text context used when no chapter is found.")
    language: Optional[str] = None


class AskResponse(BaseModel):
    answer: str
