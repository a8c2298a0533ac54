"""Chapter payloads shared by several endpoints."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ChapterContent(BaseModel):
    """Inline chapter material supplied by the client instead of a stored chapter."""

    content: Optional[str] = Field(None, description="Chapter text used as prompt source material.")
    title: Optional[str] = Field(None, description="Chapter title.")


class ChapterInfoResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    chapter_id: str = Field(..., alias="chapterId", description="Store-native chapter id.")
    title: str
    content: str
    metadata: Dict[str, Any] = Field(default_factory=dict)
