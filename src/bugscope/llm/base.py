from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, TypeVar

from bugscope import config
from bugscope import logger as logger_mod
from bugscope.helpers import redact

from .errors import LLMError, ProviderCallFailedError, UnsupportedOutputShapeError
from .types import ModelDescriptor, ProviderTag

log = logger_mod.get_logger()

T = TypeVar("T")

# (credential, timeout_s) -> SDK client. Injected in tests and by callers that
# own their transport; adapters fall back to the provider SDK otherwise.
ClientFactory = Callable[[str, float], Any]


@dataclass(frozen=True)
class AdapterConfig:
    """Per-call generation and transport settings shared by all adapters."""

    timeout_s: float = field(default_factory=lambda: config.REQUEST_TIMEOUT_S)
    max_tokens: int = field(default_factory=lambda: config.MAX_OUTPUT_TOKENS)
    temperature: float = field(default_factory=lambda: config.TEMPERATURE)

    def __post_init__(self) -> None:
        # Clamp instead of raising; a bad env value should not break dispatch.
        if self.timeout_s <= 0:
            object.__setattr__(self, "timeout_s", 1.0)
        if self.max_tokens < 1:
            object.__setattr__(self, "max_tokens", 1)
        if self.temperature < 0:
            object.__setattr__(self, "temperature", 0.0)


class ProviderAdapter(Protocol):
    """Uniform capability every provider adapter implements.

    Returns the model's raw answer text. Raises ProviderCallFailedError for
    anything that goes wrong talking to the provider and
    UnsupportedOutputShapeError when the answer is not a single string.
    """

    provider: ProviderTag

    def invoke(
        self, prompt: str, model: ModelDescriptor, credential: str
    ) -> str:
        raise NotImplementedError


def call_provider(
    provider: ProviderTag,
    credential: str,
    fn: Callable[[], T],
) -> T:
    """Run one SDK interaction, classifying every failure as ProviderCallFailed.

    The SDK exception is not chained onto the raised error: its text and its
    traceback frames can both hold the unredacted credential.
    """

    try:
        return fn()
    except LLMError:
        raise
    except Exception as e:  # noqa: BLE001
        message = redact(f"{type(e).__name__}: {e}", credential)

    # Raised outside the except block so the error carries no __context__.
    log.error(f"❌ {provider.value} call failed: {message}")
    raise ProviderCallFailedError(provider.value, message)


def require_text(value: Any, provider: ProviderTag, what: str) -> str:
    """Accept exactly one ``str``; any other payload is an unsupported shape."""

    if isinstance(value, str):
        return value
    if value is None:
        detail = f"{what} is missing"
    elif isinstance(value, (list, tuple)) or (
        hasattr(value, "__iter__") and not isinstance(value, (dict, bytes, bytearray))
    ):
        detail = f"{what} is a sequence of fragments ({type(value).__name__})"
    else:
        detail = f"{what} is not text ({type(value).__name__})"
    log.warning(f"⚠️ {provider.value} returned an unsupported output shape: {detail}")
    raise UnsupportedOutputShapeError(provider.value, detail)


def first_item(items: Any, provider: ProviderTag, what: str) -> Any:
    """First element of a response list, or UnsupportedOutputShape if there is none."""

    try:
        return items[0]
    except (IndexError, KeyError, TypeError):
        detail = f"{what} is empty"
        log.warning(f"⚠️ {provider.value} returned an unsupported output shape: {detail}")
        raise UnsupportedOutputShapeError(provider.value, detail) from None

