"""Endpoints for chapter quiz questions."""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from guiderbooks.completion import CompletionClient
from guiderbooks.configuration import Settings
from guiderbooks.errors import ValidationError
from guiderbooks.storage import ChapterStore, QuestionStore, StoredQuestion

from ..dependencies import get_chapter_store, get_completion_client, get_question_store, get_settings
from ..schemas.questions import GenerateQuestionsRequest
from ..services.questions_service import get_or_generate_questions, preview_questions

router = APIRouter(prefix="/questions", tags=["questions"])


@router.get(
    "/{chapter_id}",
    response_model=List[StoredQuestion],
    status_code=status.HTTP_200_OK,
    summary="Get stored questions for a chapter, generating them on first request",
)
async def chapter_questions(
    chapter_id: str,
    client: CompletionClient = Depends(get_completion_client),
    chapters: ChapterStore = Depends(get_chapter_store),
    questions: QuestionStore = Depends(get_question_store),
    settings: Settings = Depends(get_settings),
) -> List[StoredQuestion]:
    """Return the cached set when one exists; otherwise generate, store (max 40) and return."""
    return await get_or_generate_questions(
        client,
        chapters,
        questions,
        chapter_key=chapter_id,
        max_content_chars=settings.max_content_chars,
    )


@router.post(
    "/generate/{chapter_id}",
    response_model=List[Dict[str, Any]],
    status_code=status.HTTP_200_OK,
    summary="Generate questions from supplied chapter material without storing them",
)
async def generate_questions(
    chapter_id: str,
    request: GenerateQuestionsRequest,
    client: CompletionClient = Depends(get_completion_client),
    settings: Settings = Depends(get_settings),
) -> List[Dict[str, Any]]:
    content, title = request.material()
    if not content.strip():
        raise ValidationError("chapterContent is required")
    return await preview_questions(client, content, title, max_content_chars=settings.max_content_chars)
