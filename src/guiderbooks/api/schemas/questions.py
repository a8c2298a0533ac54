"""Request models for chapter question generation."""

from typing import Optional, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .chapters import ChapterContent


class GenerateQuestionsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    chapter_content: Optional[Union[ChapterContent, str]] = Field(
        None,
        alias="chapterContent",
        description="Chapter material as {content, title} or plain text.",
    )
    chapter_title: Optional[str] = Field(None, alias="chapterTitle")

    def material(self) -> tuple[str, str]:
        """Return (content, title) with the explicit title taking precedence."""
        body = self.chapter_content
        if isinstance(body, ChapterContent):
            return body.content or "", self.chapter_title or body.title or ""
        return body or "", self.chapter_title or ""
