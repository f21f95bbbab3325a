from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    UNKNOWN_MODEL = "UnknownModel"
    PROVIDER_CALL_FAILED = "ProviderCallFailed"
    UNSUPPORTED_OUTPUT_SHAPE = "UnsupportedOutputShape"
    NO_JSON_FOUND = "NoJsonFound"
    INVALID_SHAPE = "InvalidShape"


class LLMError(RuntimeError):
    """Base for every failure a dispatch can end in.

    ``str(err)`` is the display message; callers render it as-is.
    """

    # Subclasses narrow this; a bare LLMError comes from provider setup.
    kind: ErrorKind = ErrorKind.PROVIDER_CALL_FAILED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnknownModelError(LLMError):
    kind = ErrorKind.UNKNOWN_MODEL

    def __init__(self, identifier: str):
        super().__init__(f"Invalid model selected: {identifier!r}")
        self.identifier = identifier


class _ProviderError(LLMError):
    def __init__(self, provider: Optional[str], message: str):
        label = provider or "unknown"
        super().__init__(f"[{label}] {message}")
        self.provider = provider


class ProviderCallFailedError(_ProviderError):
    """Auth rejection, quota, network or malformed request at the provider."""

    kind = ErrorKind.PROVIDER_CALL_FAILED


class UnsupportedOutputShapeError(_ProviderError):
    """The provider answered, but not with exactly one text value."""

    kind = ErrorKind.UNSUPPORTED_OUTPUT_SHAPE


class NoJsonFoundError(LLMError):
    kind = ErrorKind.NO_JSON_FOUND


class LLMValidationError(LLMError):
    """Raised when the model output cannot be validated against the requested schema."""

    kind = ErrorKind.INVALID_SHAPE


class InvalidShapeError(LLMValidationError):
    pass
