"""Service helpers for assessment generation."""

from typing import Any, Dict, List, Optional, Tuple

from guiderbooks.agents.assessor import generate_assessment
from guiderbooks.completion import CompletionClient
from guiderbooks.storage import ChapterStore

from ..schemas.chapters import ChapterContent
from .chapter_service import ensure_content, load_material


async def build_assessment(
    client: CompletionClient,
    store: Optional[ChapterStore],
    chapter_id: Optional[str],
    inline: Optional[ChapterContent],
    max_content_chars: Optional[int] = None,
) -> Tuple[Dict[str, List[Any]], str]:
    """Generate an assessment for a stored or inline chapter; returns (assessment, title)."""
    content, title = await load_material(store, chapter_id, inline)
    content = ensure_content(content, max_content_chars)
    assessment = await generate_assessment(client, content, title)
    return assessment, title
