"""Service helpers for chapter-scoped and general questions."""

import logging
from typing import Optional, Tuple

from guiderbooks.agents.tutor import answer_from_chapter, answer_general
from guiderbooks.completion import CompletionClient
from guiderbooks.errors import NotFoundError
from guiderbooks.storage import ChapterStore

from ..schemas.chapters import ChapterContent
from .chapter_service import ensure_content, find_chapter, load_material

logger = logging.getLogger(__name__)


async def ask_chapter(
    client: CompletionClient,
    store: Optional[ChapterStore],
    question: str,
    chapter_id: str,
    inline: Optional[ChapterContent] = None,
    language: Optional[str] = None,
    max_content_chars: Optional[int] = None,
) -> Tuple[str, str]:
    """Answer a question from one chapter; returns (answer, chapter title)."""
    content, title = await load_material(store, chapter_id, inline)
    content = ensure_content(content, max_content_chars)
    answer = await answer_from_chapter(client, question, content, title, language=language)
    return answer, title


async def ask_general(
    client: CompletionClient,
    store: Optional[ChapterStore],
    question: str,
    chapter_id: Optional[str] = None,
    context: Optional[str] = None,
    language: Optional[str] = None,
) -> str:
    """Answer a free-form question; a found chapter's content replaces `context`."""
    context_to_use = context or ""
    if chapter_id and store is not None:
        try:
            chapter = await find_chapter(store, chapter_id)
        except NotFoundError:
            logger.info("Chapter %r not found; answering with supplied context", chapter_id)
        else:
            if chapter.content:
                context_to_use = chapter.content
    elif chapter_id:
        logger.warning("Chapter store unavailable; ignoring chapterId %r", chapter_id)
    return await answer_general(client, question, context_to_use or None, language=language)
