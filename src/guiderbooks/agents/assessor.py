"""
Assessment Generator
- Input: chapter content + title
- Output: {mcqs, trueFalse, fillups, qa}, each a list (10 items requested, not enforced)
"""
from typing import Any, Dict, List, Optional

from guiderbooks.coercion import coerce_assessment
from guiderbooks.completion import ASSESSMENT_OPTIONS, CompletionClient
from guiderbooks.prompts import assessment_prompt


async def generate_assessment(
    client: CompletionClient, content: str, title: Optional[str] = None
) -> Dict[str, List[Any]]:
    raw = await client.complete(assessment_prompt(content, title), ASSESSMENT_OPTIONS)
    return coerce_assessment(raw)
