"""
Tutor answers
- chapter-scoped: answers only from the supplied chapter text
- general: optional free-text context ahead of the question
Both return the model's formatted text unchanged.
"""
from typing import Optional

from guiderbooks.completion import CHAPTER_ANSWER_OPTIONS, GENERAL_ANSWER_OPTIONS, CompletionClient
from guiderbooks.prompts import chapter_answer_prompt, general_answer_prompt


async def answer_from_chapter(
    client: CompletionClient,
    question: str,
    content: str,
    title: Optional[str] = None,
    language: Optional[str] = None,
) -> str:
    prompt = chapter_answer_prompt(question, content, title, language=language)
    return await client.complete(prompt, CHAPTER_ANSWER_OPTIONS)


async def answer_general(
    client: CompletionClient,
    question: str,
    context: Optional[str] = None,
    language: Optional[str] = None,
) -> str:
    prompt = general_answer_prompt(question, context, language=language)
    return await client.complete(prompt, GENERAL_ANSWER_OPTIONS)
