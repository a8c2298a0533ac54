"""
Question Generator (chapter-based)
- asks the completion service for 10 question/answer pairs
- coerces the reply into a list of {question, answer} dicts
"""
from typing import Any, Dict, List, Optional

from guiderbooks.coercion import coerce_quiz
from guiderbooks.completion import QUIZ_OPTIONS, CompletionClient
from guiderbooks.prompts import quiz_prompt

MAX_STORED_QUESTIONS = 40


async def generate_quiz(client: CompletionClient, content: str, title: Optional[str] = None) -> List[Dict[str, Any]]:
    """Raw generated items, exactly as coerced from the model output."""
    raw = await client.complete(quiz_prompt(content, title), QUIZ_OPTIONS)
    return coerce_quiz(raw)


def clean_pairs(items: List[Dict[str, Any]], limit: int = MAX_STORED_QUESTIONS) -> List[Dict[str, str]]:
    """Keep at most `limit` items that carry both a question and an answer."""
    out: List[Dict[str, str]] = []
    for item in items[:limit]:
        q = item.get("question")
        a = item.get("answer")
        if q is None or a is None or not str(q).strip():
            continue
        out.append({"question": str(q).strip(), "answer": str(a).strip()})
    return out
