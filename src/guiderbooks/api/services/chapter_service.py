"""Service helpers for locating chapter material."""

import logging
from typing import Optional, Tuple

from guiderbooks.errors import ContentTooLongError, NotFoundError, StoreUnavailableError, ValidationError
from guiderbooks.storage import Chapter, ChapterStore, Found, resolve_chapter

from ..schemas.chapters import ChapterContent

logger = logging.getLogger(__name__)


async def find_chapter(store: ChapterStore, identifier: str) -> Chapter:
    """Resolve a chapter key or native id, raising NotFoundError on a miss."""
    lookup = await resolve_chapter(store, identifier)
    if isinstance(lookup, Found):
        logger.debug("Chapter %r resolved by %s", identifier, lookup.matched_by)
        return lookup.chapter
    raise NotFoundError(context={"identifier": identifier})


async def load_material(
    store: Optional[ChapterStore],
    chapter_id: Optional[str],
    inline: Optional[ChapterContent],
    missing_message: str = "chapterId or chapterContent is required",
) -> Tuple[str, str]:
    """Return (content, title), preferring inline material over a store lookup."""
    if inline is not None and inline.content:
        return inline.content, inline.title or ""
    if not chapter_id:
        raise ValidationError(missing_message)
    if store is None:
        raise StoreUnavailableError()
    chapter = await find_chapter(store, chapter_id)
    return chapter.content, chapter.title


def ensure_content(content: Optional[str], max_chars: Optional[int] = None) -> str:
    """Reject empty material, and material over the optional local size limit."""
    if not content or not content.strip():
        raise ValidationError("No chapter content available")
    if max_chars is not None and len(content) > max_chars:
        raise ContentTooLongError(context={"chars": len(content), "limit": max_chars})
    return content
