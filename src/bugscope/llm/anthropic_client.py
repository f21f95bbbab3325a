from __future__ import annotations

from typing import Any, Optional

from bugscope import logger as logger_mod

from .base import (
    AdapterConfig,
    ClientFactory,
    call_provider,
    first_item,
    require_text,
)
from .errors import ProviderCallFailedError, UnsupportedOutputShapeError
from .types import ModelDescriptor, ProviderTag

log = logger_mod.get_logger()


def _default_client(credential: str, timeout_s: float) -> Any:
    try:
        from anthropic import Anthropic  # type: ignore
    except ImportError as e:
        raise ProviderCallFailedError(
            ProviderTag.ANTHROPIC.value,
            "anthropic SDK not installed. Add dependency 'anthropic'.",
        ) from e

    return Anthropic(api_key=credential, timeout=timeout_s)


class AnthropicAdapter:
    """Messages API adapter.

    One user message carrying the whole prompt; the answer is the first
    content block, which must be a text block.
    """

    provider = ProviderTag.ANTHROPIC

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
            return client.messages.create(
                model=model.request_model,
                max_tokens=self._cfg.max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )

        log.debug(f"Anthropic messages.create model={model.request_model}")
        resp = call_provider(self.provider, credential, _call)

        block = first_item(getattr(resp, "content", None), self.provider, "content")
        block_type = getattr(block, "type", "text")
        if block_type != "text":
            detail = f"first content block is {block_type!r}, not text"
            log.warning(f"⚠️ anthropic returned an unsupported output shape: {detail}")
            raise UnsupportedOutputShapeError(self.provider.value, detail)
        return require_text(getattr(block, "text", None), self.provider, "content text")
