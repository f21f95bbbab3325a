from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Union

from bugscope import logger as logger_mod
from bugscope.helpers import redact

from ._json import extract_json, has_brace_span
from .base import AdapterConfig, ProviderAdapter
from .catalog import lookup
from .errors import (
    ErrorKind,
    LLMError,
    NoJsonFoundError,
    ProviderCallFailedError,
    UnknownModelError,
)
from .factory import build_adapters
from .prompts import build_prompt
from .types import (
    DiagnosticRequest,
    DiagnosticResult,
    ModelDescriptor,
    NotFound,
    ProviderTag,
)
from .validation import validate_result

log = logger_mod.get_logger()

CatalogLookup = Callable[[str], Union[ModelDescriptor, NotFound]]

NO_JSON_MESSAGE = "No JSON found in response"
UNPARSEABLE_JSON_MESSAGE = "Could not parse JSON from response"


def _detach(error: LLMError) -> LLMError:
    """Drop the traceback and exception chain before the error is handed out.

    Frames and chained SDK exceptions may still reference the credential.
    """

    error.__cause__ = None
    error.__context__ = None
    error.__suppress_context__ = False
    return error.with_traceback(None)


class DispatchState(str, Enum):
    IDLE = "idle"
    BUILDING = "building"
    CALLING = "calling"
    EXTRACTING = "extracting"
    VALIDATING = "validating"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class DispatchOutcome:
    """Terminal state of one dispatch: exactly one of result / error is set."""

    state: DispatchState
    model_identifier: str
    provider: Optional[ProviderTag]
    trail: Tuple[DispatchState, ...]
    result: Optional[DiagnosticResult] = None
    error: Optional[LLMError] = None

    @property
    def ok(self) -> bool:
        return self.state is DispatchState.SUCCEEDED

    @property
    def error_kind(self) -> Optional[ErrorKind]:
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str:
        return self.error.message if self.error is not None else ""

    def unwrap(self) -> DiagnosticResult:
        if self.error is not None:
            raise self.error
        if self.result is None:
            raise RuntimeError(
                f"Dispatch outcome in state {self.state.value} has no result"
            )
        return self.result


class Dispatcher:
    """Runs prompt -> provider call -> extraction -> validation, once.

    No retries and no fallback to a second provider. Holds only adapters,
    which are stateless, so one Dispatcher may serve concurrent requests.
    """

    def __init__(
        self,
        adapters: Optional[Mapping[ProviderTag, ProviderAdapter]] = None,
        *,
        config: Optional[AdapterConfig] = None,
        catalog_lookup: CatalogLookup = lookup,
    ):
        if adapters is None:
            adapters = build_adapters(config=config)
        missing = [tag.value for tag in ProviderTag if tag not in adapters]
        if missing:
            raise ValueError(f"No adapter registered for provider(s): {missing}")
        self._adapters: Dict[ProviderTag, ProviderAdapter] = dict(adapters)
        self._lookup = catalog_lookup

    def dispatch(self, request: DiagnosticRequest) -> DispatchOutcome:
        trail: List[DispatchState] = [DispatchState.IDLE]
        model: Optional[ModelDescriptor] = None

        def _advance(state: DispatchState) -> None:
            log.debug(
                f"dispatch {request.model_identifier}: "
                f"{trail[-1].value} -> {state.value}"
            )
            trail.append(state)

        def _finish(
            result: Optional[DiagnosticResult] = None,
            error: Optional[LLMError] = None,
        ) -> DispatchOutcome:
            if error is not None:
                _advance(DispatchState.FAILED)
                log.warning(
                    f"⚠️ Dispatch failed ({error.kind.value}) "
                    f"model={request.model_identifier}: {error.message}"
                )
            else:
                _advance(DispatchState.SUCCEEDED)
                log.info(f"✅ Dispatch succeeded model={request.model_identifier}")
            return DispatchOutcome(
                state=trail[-1],
                model_identifier=request.model_identifier,
                provider=model.provider if model is not None else None,
                trail=tuple(trail),
                result=result,
                error=_detach(error) if error is not None else None,
            )

        found = self._lookup(request.model_identifier)
        if isinstance(found, NotFound):
            return _finish(error=UnknownModelError(request.model_identifier))
        model = found
        _advance(DispatchState.BUILDING)

        prompt = build_prompt(request.code_text, request.problem_text)
        adapter = self._adapters[model.provider]
        _advance(DispatchState.CALLING)

        failure: Optional[LLMError] = None
        try:
            raw_text = adapter.invoke(prompt, model, request.credential)
        except LLMError as e:
            failure = e
        except Exception as e:  # noqa: BLE001
            # Unclassified adapter failure.
            message = redact(f"{type(e).__name__}: {e}", request.credential)
            failure = ProviderCallFailedError(model.provider.value, message)
        if failure is not None:
            return _finish(error=failure)
        _advance(DispatchState.EXTRACTING)

        extracted = extract_json(raw_text)
        if isinstance(extracted, NotFound):
            log.debug(f"No JSON in answer sample={raw_text[:120]!r}")
            message = (
                UNPARSEABLE_JSON_MESSAGE if has_brace_span(raw_text) else NO_JSON_MESSAGE
            )
            return _finish(error=NoJsonFoundError(message))
        _advance(DispatchState.VALIDATING)

        try:
            result = validate_result(extracted.value)
        except LLMError as e:
            return _finish(error=e)
        return _finish(result=result)


def dispatch(
    request: DiagnosticRequest,
    *,
    adapters: Optional[Mapping[ProviderTag, ProviderAdapter]] = None,
    config: Optional[AdapterConfig] = None,
) -> DispatchOutcome:
    return Dispatcher(adapters, config=config).dispatch(request)


def diagnose(
    code_text: str,
    problem_text: str,
    model_identifier: str,
    credential: str,
    *,
    adapters: Optional[Mapping[ProviderTag, ProviderAdapter]] = None,
    config: Optional[AdapterConfig] = None,
) -> DiagnosticResult:
    """Dispatch one request and return its result, raising the LLMError on failure."""

    request = DiagnosticRequest(
        code_text=code_text,
        problem_text=problem_text,
        model_identifier=model_identifier,
        credential=credential,
    )
    return dispatch(request, adapters=adapters, config=config).unwrap()
