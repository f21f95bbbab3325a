from __future__ import annotations

from typing import Any, Dict

from jsonschema import Draft7Validator

from .errors import InvalidShapeError
from .prompts import RESULT_KEYS
from .types import DiagnosticResult

RESULT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": list(RESULT_KEYS),
    "properties": {key: {"type": "string", "minLength": 1} for key in RESULT_KEYS},
}

_validator = Draft7Validator(RESULT_SCHEMA)


def validate_result(instance: Any) -> DiagnosticResult:
    """Build a DiagnosticResult, or raise InvalidShapeError.

    Extra keys are ignored; nothing is coerced or defaulted.
    """

    errors = sorted(_validator.iter_errors(instance), key=lambda e: list(e.path))
    if errors:
        first = errors[0]
        where = ".".join(str(p) for p in first.path) or "$"
        raise InvalidShapeError(f"Invalid response format ({where}: {first.message})")

    return DiagnosticResult(
        problem_analysis=instance["problem"],
        solution_steps=instance["solution"],
        code_snippet=instance["codeSnippet"],
    )
