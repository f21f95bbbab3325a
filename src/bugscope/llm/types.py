from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Literal, Optional

from bugscope.helpers import is_blank

Role = Literal["system", "user", "assistant"]


class ProviderTag(str, Enum):
    GOOGLE = "google"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    REPLICATE = "replicate"


@dataclass(frozen=True)
class LLMMessage:
    role: Role
    content: str


@dataclass(frozen=True)
class ModelDescriptor:
    identifier: str
    display_label: str
    provider: ProviderTag
    # Name sent to the provider when it differs from the catalog identifier
    # (dated model names, pinned Replicate versions).
    api_model: Optional[str] = None
    # Provider accepts a JSON-object response format for this model.
    json_mode: bool = False

    @property
    def request_model(self) -> str:
        return self.api_model or self.identifier


@dataclass(frozen=True)
class ProviderInfo:
    """Presentation metadata for a provider; nothing in dispatch reads it."""

    provider: ProviderTag
    group_label: str
    credential_label: str
    credential_placeholder: str


@dataclass(frozen=True)
class DiagnosticRequest:
    code_text: str
    problem_text: str
    model_identifier: str
    credential: str = field(repr=False)

    def missing_fields(self) -> List[str]:
        """Names of blank fields, for callers that refuse to dispatch them."""
        names = {
            "code_text": self.code_text,
            "problem_text": self.problem_text,
            "model_identifier": self.model_identifier,
            "credential": self.credential,
        }
        return [name for name, value in names.items() if is_blank(value)]


@dataclass(frozen=True)
class DiagnosticResult:
    problem_analysis: str
    solution_steps: str
    code_snippet: str

    def as_dict(self) -> Dict[str, str]:
        return {
            "problem": self.problem_analysis,
            "solution": self.solution_steps,
            "codeSnippet": self.code_snippet,
        }


@dataclass(frozen=True)
class Parsed:
    value: Any


class NotFound:
    _instance: Optional["NotFound"] = None

    def __new__(cls) -> "NotFound":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND = NotFound()
