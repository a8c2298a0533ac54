"""General Q&A endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, status

from guiderbooks.completion import CompletionClient
from guiderbooks.errors import ValidationError
from guiderbooks.storage import ChapterStore

from ..dependencies import get_completion_client, get_optional_chapter_store
from ..schemas.ask import AskRequest, AskResponse
from ..services.ask_service import ask_general

router = APIRouter(prefix="/ask", tags=["ask"])


@router.post(
    "",
    response_model=AskResponse,
    status_code=status.HTTP_200_OK,
    summary="Ask a general question, optionally grounded in a chapter or context",
)
async def ask(
    request: AskRequest,
    client: CompletionClient = Depends(get_completion_client),
    store: Optional[ChapterStore] = Depends(get_optional_chapter_store),
) -> AskResponse:
    question = (request.question or "").strip()
    if not question:
        raise ValidationError("Question is required")

    answer = await ask_general(
        client,
        store,
        question=question,
        chapter_id=request.chapter_id,
        context=request.context,
        language=request.language,
    )
    return AskResponse(answer=answer)
