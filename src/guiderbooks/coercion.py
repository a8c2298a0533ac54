"""
Response coercion: turn raw model text into a validated structure.

Two stages per shape:
1. strict parse - the whole text must be JSON of the expected shape
2. extraction - each place where the shape's literal can start is decoded as
   exactly one JSON value (trailing prose ignored); the first that fits wins

Anything that fails both stages raises CoercionError; partial data is never returned.
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional, Pattern, Tuple

from guiderbooks.errors import CoercionError

logger = logging.getLogger(__name__)

ASSESSMENT_KEYS = ("mcqs", "trueFalse", "fillups", "qa")

_NOT_PARSED = object()


@dataclass(frozen=True)
class ResponseShape:
    """Expected structure of a model response."""

    name: str
    check: Callable[[Any], bool]
    pattern: Pattern[str]
    failure_message: str


def is_question_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, dict) for item in value)


def is_assessment(value: Any) -> bool:
    return isinstance(value, dict) and all(isinstance(value.get(k), list) for k in ASSESSMENT_KEYS)


QUIZ_SHAPE = ResponseShape(
    name="quiz",
    check=is_question_list,
    # where an array literal opening on an object starts
    pattern=re.compile(r"\[\s*\{"),
    failure_message="Failed to extract valid JSON array from response.",
)

ASSESSMENT_SHAPE = ResponseShape(
    name="assessment",
    check=is_assessment,
    # where an object literal opening on a required key starts
    pattern=re.compile(r"\{\s*\"(?:mcqs|trueFalse|fillups|qa)\"\s*:"),
    failure_message="Failed to extract valid assessment JSON from response.",
)

_DECODER = json.JSONDecoder()


def parse_strict(raw: str) -> Any:
    """Parse text as JSON; returns a sentinel instead of raising."""
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        return _NOT_PARSED


def _embedded(raw: str, shape: ResponseShape) -> Iterator[Tuple[str, Any]]:
    # one JSON value decoded from each candidate start; trailing text is ignored
    if not isinstance(raw, str):
        return
    for match in shape.pattern.finditer(raw):
        start = match.start()
        try:
            value, end = _DECODER.raw_decode(raw, start)
        except ValueError:
            continue
        if shape.check(value):
            yield raw[start:end], value


def extract_embedded(raw: str, shape: ResponseShape) -> Optional[str]:
    """First literal inside `raw` that decodes to the shape, if any."""
    for snippet, _ in _embedded(raw, shape):
        return snippet
    return None


def coerce(raw: str, shape: ResponseShape) -> Any:
    parsed = parse_strict(raw)
    if parsed is not _NOT_PARSED and shape.check(parsed):
        return parsed

    logger.info("Strict %s parse failed; trying embedded extraction", shape.name)
    for _, value in _embedded(raw, shape):
        return value

    logger.warning("Could not coerce %s response (%d chars)", shape.name, len(raw or ""))
    raise CoercionError(shape.failure_message, context={"shape": shape.name})


def coerce_quiz(raw: str) -> List[Dict[str, Any]]:
    return coerce(raw, QUIZ_SHAPE)


def coerce_assessment(raw: str) -> Dict[str, List[Any]]:
    return coerce(raw, ASSESSMENT_SHAPE)
