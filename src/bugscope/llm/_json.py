from __future__ import annotations

import json
from typing import Optional, Tuple, Union

from .types import NOT_FOUND, NotFound, Parsed


def _brace_span(text: str) -> Optional[Tuple[int, int]]:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    return start, end + 1


def has_brace_span(text: str) -> bool:
    """True when the text holds a ``{`` ... ``}`` span, parseable or not."""
    return isinstance(text, str) and _brace_span(text) is not None


def extract_json(text: str) -> Union[Parsed, NotFound]:
    """Recover a JSON value from a model answer.

    Models are told to answer with JSON only but routinely wrap it in prose.
    Tries the whole text first, then the span from the first ``{`` to the
    last ``}``. Braces inside the surrounding prose can defeat the second
    step; that is accepted rather than parsed around.
    """

    try:
        return Parsed(json.loads(text))
    except (TypeError, ValueError):
        pass

    if not isinstance(text, str):
        return NOT_FOUND

    span = _brace_span(text)
    if span is None:
        return NOT_FOUND

    try:
        return Parsed(json.loads(text[span[0] : span[1]]))
    except ValueError:
        return NOT_FOUND
