"""Assessment generation endpoint."""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, status

from guiderbooks.completion import CompletionClient
from guiderbooks.configuration import Settings
from guiderbooks.errors import GuiderbooksError
from guiderbooks.storage import ChapterStore

from ..dependencies import get_completion_client, get_optional_chapter_store, get_settings
from ..schemas.assessment import Assessment, AssessmentRequest, AssessmentResponse
from ..services.assessment_service import build_assessment

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/assessment", tags=["assessment"])


@router.post(
    "",
    response_model=AssessmentResponse,
    status_code=status.HTTP_200_OK,
    summary="Generate MCQ, true/false, fill-up and Q&A items for a chapter",
)
async def create_assessment(
    request: AssessmentRequest,
    client: CompletionClient = Depends(get_completion_client),
    store: Optional[ChapterStore] = Depends(get_optional_chapter_store),
    settings: Settings = Depends(get_settings),
) -> AssessmentResponse:
    """Build an assessment from inline chapter content, or from a stored chapter by id."""
    try:
        assessment, title = await build_assessment(
            client,
            store,
            chapter_id=request.chapter_id,
            inline=request.chapter_content,
            max_content_chars=settings.max_content_chars,
        )
    except GuiderbooksError:
        raise
    except Exception as exc:
        logger.exception("Error in assessment route")
        raise GuiderbooksError("Failed to generate assessment") from exc

    return AssessmentResponse(
        chapter_title=title,
        assessment=Assessment.model_validate(assessment),
        timestamp=datetime.now(timezone.utc),
    )
