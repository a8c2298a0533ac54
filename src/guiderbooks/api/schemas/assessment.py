"""Schemas for assessment generation."""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .chapters import ChapterContent


class AssessmentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    chapter_id: Optional[str] = Field(None, alias="chapterId")
    chapter_content: Optional[ChapterContent] = Field(None, alias="chapterContent")


class Assessment(BaseModel):
    """Four independent collections; item shapes are passed through as generated.

    mcqs:      {question, options[], answer}
    trueFalse: {statement, answer: bool}
    fillups:   {sentence, answer}
    qa:        {question, answer}
    """

    model_config = ConfigDict(populate_by_name=True)

    mcqs: List[Any] = Field(default_factory=list)
    true_false: List[Any] = Field(default_factory=list, alias="trueFalse")
    fillups: List[Any] = Field(default_factory=list)
    qa: List[Any] = Field(default_factory=list)


class AssessmentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    chapter_title: str = Field(..., alias="chapterTitle")
    assessment: Assessment
    timestamp: datetime
