"""Structured debugging requests over several LLM providers.

Design goals:
- Keep provider-specific SDKs isolated behind one ``invoke`` capability.
- Ask every provider for the same fixed JSON shape.
- Recover that JSON from loosely formatted answers and validate it, so callers
  only ever see a DiagnosticResult or a classified LLMError.
"""

from .catalog import get_model, list_models, lookup, models_by_provider
from .dispatcher import DispatchOutcome, Dispatcher, DispatchState, diagnose, dispatch
from .errors import (
    ErrorKind,
    InvalidShapeError,
    LLMError,
    NoJsonFoundError,
    ProviderCallFailedError,
    UnknownModelError,
    UnsupportedOutputShapeError,
)
from .factory import build_adapter, build_adapters
from .types import DiagnosticRequest, DiagnosticResult, ModelDescriptor, ProviderTag

__all__ = [
    "DiagnosticRequest",
    "DiagnosticResult",
    "DispatchOutcome",
    "DispatchState",
    "Dispatcher",
    "ErrorKind",
    "InvalidShapeError",
    "LLMError",
    "ModelDescriptor",
    "NoJsonFoundError",
    "ProviderCallFailedError",
    "ProviderTag",
    "UnknownModelError",
    "UnsupportedOutputShapeError",
    "build_adapter",
    "build_adapters",
    "diagnose",
    "dispatch",
    "get_model",
    "list_models",
    "lookup",
    "models_by_provider",
]
