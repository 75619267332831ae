"""Turn raw generated text into a short, clean list of questions."""
from __future__ import annotations

import re

from csvq.config import settings

_NUMBERED_RE = re.compile(r"^\d+[.)]")
_NUMBER_PREFIX_RE = re.compile(r"^\d+[.)]\s*")
_BULLET_PREFIX_RE = re.compile(r"^[-*•]\s*")


def parse_questions_from_text(
    text: str,
    *,
    max_questions: int | None = None,
    min_length: int | None = None,
) -> list[str]:
    """Keep lines with a ``?`` or a ``1.``/``1)`` prefix, strip markers, drop short ones.

    Never raises; question-free input yields ``[]``.
    """
    limit = max_questions if max_questions is not None else settings.MAX_QUESTIONS
    floor = min_length if min_length is not None else settings.MIN_QUESTION_CHARS

    lines = (line.strip() for line in text.split("\n"))
    candidates = [
        line for line in lines
        if line and ("?" in line or _NUMBERED_RE.match(line))
    ]

    questions: list[str] = []
    for line in candidates:
        cleaned = _NUMBER_PREFIX_RE.sub("", line, count=1)
        cleaned = _BULLET_PREFIX_RE.sub("", cleaned, count=1).strip()
        if len(cleaned) > floor:
            questions.append(cleaned)
    return questions[:limit]
