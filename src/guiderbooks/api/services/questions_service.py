"""Service helpers around the question generation agent."""

import logging
from typing import Any, Dict, List, Optional

from guiderbooks.agents.qgen import MAX_STORED_QUESTIONS, clean_pairs, generate_quiz
from guiderbooks.completion import CompletionClient
from guiderbooks.errors import GuiderbooksError
from guiderbooks.storage import ChapterStore, QuestionStore, StoredQuestion

from .chapter_service import ensure_content, find_chapter

logger = logging.getLogger(__name__)


async def get_or_generate_questions(
    client: CompletionClient,
    chapters: ChapterStore,
    questions: QuestionStore,
    chapter_key: str,
    max_content_chars: Optional[int] = None,
) -> List[StoredQuestion]:
    """Return stored questions for the chapter, generating and persisting them on a miss.

    The existence check and the insert are not atomic: concurrent first requests for
    the same chapter may each generate and store a set.
    """
    existing = await questions.find_by_chapter_key(chapter_key)
    if existing:
        logger.info("Returning %d cached questions for chapter %r", len(existing), chapter_key)
        return existing

    chapter = await find_chapter(chapters, chapter_key)
    if not chapter.content.strip():
        # stored chapter with no text to generate from
        raise GuiderbooksError(
            "No chapter content available", error_code="EMPTY_CHAPTER", context={"chapter": chapter_key}
        )
    content = ensure_content(chapter.content, max_content_chars)
    generated = await generate_quiz(client, content, chapter.title)

    to_save = clean_pairs(generated, limit=MAX_STORED_QUESTIONS)
    capped = min(len(generated), MAX_STORED_QUESTIONS)
    if len(to_save) < capped:
        logger.warning("Dropped %d incomplete generated questions", capped - len(to_save))
    saved = await questions.insert_many(chapter, chapter_key, to_save)
    logger.info("Stored %d generated questions for chapter %r", len(saved), chapter_key)
    return saved


async def preview_questions(
    client: CompletionClient,
    content: str,
    title: Optional[str],
    max_content_chars: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Generate questions from inline material without persisting them."""
    content = ensure_content(content, max_content_chars)
    return await generate_quiz(client, content, title)
