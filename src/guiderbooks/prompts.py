"""
Prompt templates for every request kind.

Each builder fills a ChatPromptTemplate and returns a PromptPair (system + user).
Builders do no I/O; they only check that the required inputs are present.
"""
from __future__ import annotations

from typing import List, Optional

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel, ConfigDict


class PromptPair(BaseModel):
    """System instruction plus user content for one completion call."""

    model_config = ConfigDict(frozen=True)

    system: str
    user: str

    def to_messages(self) -> List[BaseMessage]:
        return [SystemMessage(content=self.system), HumanMessage(content=self.user)]


# ---------------- Shared fragments ----------------

_FORMAT_RULES = (
    "RESPONSE FORMAT:\n"
    "- Use **BOLD HEADINGS** for main sections\n"
    "- Use bullet points for lists\n"
    "- Include examples with ✅ emoji\n"
    "- Use line breaks for readability\n"
    "- If mathematical concepts are involved, use LaTeX format with `$...$` or `$$...$$`"
)

# ---------------- Templates ----------------

_CHAPTER_SYSTEM = (
    "You are an expert teacher and educational assistant. You have access to a specific "
    "chapter's content and should answer questions based on that content.\n\n"
    "IMPORTANT GUIDELINES:\n"
    "- Base your answers ONLY on the provided chapter content\n"
    "- If the question cannot be answered from the chapter content, say so clearly\n"
    "- Provide detailed, educational explanations\n"
    "- Use clear, structured formatting\n"
    "- Include relevant examples when possible\n"
    "- Be encouraging and supportive in your tone{language_rule}\n\n"
    + _FORMAT_RULES
    + "\n\nChapter Title: {title}\n"
    "Chapter Content: {content}"
)

_CHAPTER_USER = (
    "Question: {question}\n\n"
    "Please answer this question based on the chapter content provided above."
)

_GENERAL_SYSTEM = (
    "You are an expert teacher and educational assistant. You provide clear, detailed "
    "explanations on various topics.\n\n"
    "IMPORTANT GUIDELINES:\n"
    "- Provide comprehensive, educational explanations\n"
    "- Use clear, structured formatting\n"
    "- Include relevant examples when possible\n"
    "- Be encouraging and supportive in your tone\n"
    "- If context is provided, use it to give more relevant answers{language_rule}\n\n"
    + _FORMAT_RULES
)

_GENERAL_USER_WITH_CONTEXT = "Context:\n{context}\n\nQuestion:\n{question}"

_QUIZ_SYSTEM = "You are a helpful assistant that creates quiz questions from chapter content in JSON format."

_QUIZ_USER = (
    "Generate 10 quiz questions and answers based ONLY on the chapter content below.\n"
    "Title: {title}\n"
    "Content: {content}\n\n"
    "Respond ONLY as a JSON array like:\n"
    "[\n"
    "  {{ \"question\": \"What is...\", \"answer\": \"...\" }},\n"
    "  ...\n"
    "]"
)

_ASSESSMENT_SYSTEM = "You return ONLY strict JSON as requested. Never include extra text."

_ASSESSMENT_USER = (
    "You are a strict formatter. Create a comprehensive assessment ONLY from the given chapter.\n"
    "Title: {title}\n"
    "Content: {content}\n\n"
    "Return a SINGLE VALID JSON object with EXACTLY these keys and formats:\n"
    "{{\n"
    "  \"mcqs\": [\n"
    "    {{ \"question\": \"string\", \"options\": [\"A\",\"B\",\"C\",\"D\"], \"answer\": \"exact option text\" }}\n"
    "  ],\n"
    "  \"trueFalse\": [\n"
    "    {{ \"statement\": \"string\", \"answer\": true }}\n"
    "  ],\n"
    "  \"fillups\": [\n"
    "    {{ \"sentence\": \"Sentence with a _____ blank\", \"answer\": \"string\" }}\n"
    "  ],\n"
    "  \"qa\": [\n"
    "    {{ \"question\": \"string\", \"answer\": \"string\" }}\n"
    "  ]\n"
    "}}\n\n"
    "Rules:\n"
    "- 10 MCQs, 10 True/False, 10 Fill-ups, 10 Q&A.\n"
    "- Options must be plausible; only one correct answer.\n"
    "- Answers must be precise and derivable from the chapter.\n"
    "- Do not include any prose, Markdown, or explanation outside the JSON."
)

# ---------------- Helpers ----------------

def _render(system: str, user: str, **values: str) -> PromptPair:
    prompt = ChatPromptTemplate.from_messages([("system", system), ("human", user)])
    system_msg, user_msg = prompt.format_messages(**values)
    return PromptPair(system=system_msg.content, user=user_msg.content)


def _language_rule(language: Optional[str]) -> str:
    lang = (language or "").strip()
    return f"\n- Respond in {lang}" if lang else ""


def _require(value: Optional[str], name: str) -> str:
    if value is None or not str(value).strip():
        raise ValueError(f"Prompt input '{name}' is required.")
    return str(value)

# ---------------- Builders ----------------

def chapter_answer_prompt(
    question: str,
    content: str,
    title: Optional[str] = None,
    language: Optional[str] = None,
) -> PromptPair:
    """Q&A restricted to a single chapter's content."""
    return _render(
        _CHAPTER_SYSTEM,
        _CHAPTER_USER,
        question=_require(question, "question"),
        content=_require(content, "content"),
        title=title or "",
        language_rule=_language_rule(language),
    )


def general_answer_prompt(
    question: str,
    context: Optional[str] = None,
    language: Optional[str] = None,
) -> PromptPair:
    """Open Q&A; the context block is prepended only when supplied."""
    question = _require(question, "question")
    if context and context.strip():
        return _render(
            _GENERAL_SYSTEM,
            _GENERAL_USER_WITH_CONTEXT,
            question=question,
            context=context,
            language_rule=_language_rule(language),
        )
    return _render(
        _GENERAL_SYSTEM,
        "{question}",
        question=question,
        language_rule=_language_rule(language),
    )


def quiz_prompt(content: str, title: Optional[str] = None) -> PromptPair:
    return _render(
        _QUIZ_SYSTEM,
        _QUIZ_USER,
        content=_require(content, "content"),
        title=title or "",
    )


def assessment_prompt(content: str, title: Optional[str] = None) -> PromptPair:
    return _render(
        _ASSESSMENT_SYSTEM,
        _ASSESSMENT_USER,
        content=_require(content, "content"),
        title=title or "",
    )
