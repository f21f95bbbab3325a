from __future__ import annotations

from typing import Any, Optional

from bugscope import logger as logger_mod

from .base import AdapterConfig, ClientFactory, call_provider, require_text
from .errors import ProviderCallFailedError
from .types import ModelDescriptor, ProviderTag

log = logger_mod.get_logger()


def _default_client(credential: str, timeout_s: float) -> Any:
    try:
        import replicate  # type: ignore
    except ImportError as e:
        raise ProviderCallFailedError(
            ProviderTag.REPLICATE.value,
            "replicate SDK not installed. Add dependency 'replicate'.",
        ) from e

    return replicate.Client(api_token=credential, timeout=timeout_s)


class ReplicateAdapter:
    """Hosted model run adapter.

    The prompt travels with its generation parameters in the run input.
    Depending on the model, ``run`` may hand back a string, a list or
    iterator of text chunks, or a file object; only a single string is
    accepted.
    """

    provider = ProviderTag.REPLICATE

    def __init__(
        self,
        config: Optional[AdapterConfig] = None,
        client_factory: Optional[ClientFactory] = None,
    ):
        self._cfg = config or AdapterConfig()
        self._client_factory = client_factory or _default_client

    def _input(self, prompt: str) -> dict[str, Any]:
        return {
            "prompt": prompt,
            "max_new_tokens": self._cfg.max_tokens,
            "temperature": self._cfg.temperature,
        }

    def invoke(self, prompt: str, model: ModelDescriptor, credential: str) -> str:
        def _call() -> Any:
            client = self._client_factory(credential, self._cfg.timeout_s)
            return client.run(model.request_model, input=self._input(prompt))

        log.debug(f"Replicate run ref={model.request_model}")
        output = call_provider(self.provider, credential, _call)
        return require_text(output, self.provider, "run output")
