"""Chapter-scoped Q&A endpoints."""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, status

from guiderbooks.completion import CompletionClient
from guiderbooks.configuration import Settings
from guiderbooks.errors import GuiderbooksError, NotFoundError, ValidationError
from guiderbooks.storage import ChapterStore

from ..dependencies import get_chapter_store, get_completion_client, get_optional_chapter_store, get_settings
from ..schemas.ask import AskChapterRequest, AskChapterResponse
from ..schemas.chapters import ChapterInfoResponse
from ..services.ask_service import ask_chapter
from ..services.chapter_service import find_chapter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ask-chapter", tags=["ask-chapter"])


@router.post(
    "",
    response_model=AskChapterResponse,
    status_code=status.HTTP_200_OK,
    summary="Ask a question about a specific chapter",
)
async def ask_about_chapter(
    request: AskChapterRequest,
    client: CompletionClient = Depends(get_completion_client),
    store: Optional[ChapterStore] = Depends(get_optional_chapter_store),
    settings: Settings = Depends(get_settings),
) -> AskChapterResponse:
    """Answer strictly from the chapter's content, loading it from the store unless supplied inline."""
    question = (request.question or "").strip()
    if not question or not request.chapter_id:
        raise ValidationError("Question and chapterId are required")

    answer, title = await ask_chapter(
        client,
        store,
        question=question,
        chapter_id=request.chapter_id,
        inline=request.chapter_content,
        language=request.language,
        max_content_chars=settings.max_content_chars,
    )
    return AskChapterResponse(
        answer=answer,
        chapter_title=title,
        question=question,
        timestamp=datetime.now(timezone.utc),
    )


@router.get(
    "/{chapter_id}",
    response_model=ChapterInfoResponse,
    status_code=status.HTTP_200_OK,
    summary="Get chapter info for asking questions",
)
async def chapter_info(
    chapter_id: str,
    store: ChapterStore = Depends(get_chapter_store),
) -> ChapterInfoResponse:
    try:
        chapter = await find_chapter(store, chapter_id)
    except NotFoundError:
        raise
    except Exception as exc:
        logger.exception("Error fetching chapter %r", chapter_id)
        raise GuiderbooksError("Failed to fetch chapter information") from exc

    return ChapterInfoResponse(
        chapter_id=chapter.id,
        title=chapter.title,
        content=chapter.content,
        metadata=chapter.metadata,
    )
