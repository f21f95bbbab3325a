from __future__ import annotations

from typing import Any, Optional

from bugscope import logger as logger_mod

from .base import AdapterConfig, ClientFactory, call_provider, require_text
from .errors import ProviderCallFailedError
from .types import ModelDescriptor, ProviderTag

log = logger_mod.get_logger()


def _default_client(credential: str, timeout_s: float) -> Any:
    try:
        from google import genai  # type: ignore
        from google.genai import types  # type: ignore
    except ImportError as e:
        raise ProviderCallFailedError(
            ProviderTag.GOOGLE.value,
            "google-genai SDK not installed. Add dependency 'google-genai'.",
        ) from e

    # HttpOptions.timeout is in milliseconds
    return genai.Client(
        api_key=credential,
        http_options=types.HttpOptions(timeout=int(timeout_s * 1000)),
    )


def _response_text(resp: Any) -> Any:
    # `.text` is a property that may raise when the candidate was blocked or
    # carries only non-text parts.
    try:
        return getattr(resp, "text", None)
    except ValueError:
        return None


class GeminiAdapter:
    """Single-turn generate adapter: the prompt goes in as one user turn."""

    provider = ProviderTag.GOOGLE

    def __init__(
        self,
        config: Optional[AdapterConfig] = None,
        client_factory: Optional[ClientFactory] = None,
    ):
        self._cfg = config or AdapterConfig()
        self._client_factory = client_factory or _default_client

    def invoke(self, prompt: str, model: ModelDescriptor, credential: str) -> str:
        def _call() -> Any:
            client = self._client_factory(credential, self._cfg.timeout_s)
            return client.models.generate_content(
                model=model.request_model,
                contents=prompt,
            )

        log.debug(f"Gemini generate_content model={model.request_model}")
        resp = call_provider(self.provider, credential, _call)
        return require_text(_response_text(resp), self.provider, "generated text")
