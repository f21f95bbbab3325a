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
from .errors import ProviderCallFailedError
from .prompts import SYSTEM_INSTRUCTION
from .types import LLMMessage, ModelDescriptor, ProviderTag

log = logger_mod.get_logger()


def _default_client(credential: str, timeout_s: float) -> Any:
    try:
        from openai import OpenAI  # type: ignore
    except ImportError as e:
        raise ProviderCallFailedError(
            ProviderTag.OPENAI.value,
            "openai SDK not installed. Add dependency 'openai'.",
        ) from e

    return OpenAI(api_key=credential, timeout=timeout_s)


class OpenAIAdapter:
    """Chat-completions adapter.

    Sends the role framing as a system message and the prompt as the user
    message. Models flagged ``json_mode`` also get the JSON-object response
    format; the rest rely on the prompt and the extractor. The answer is the
    first choice's message content.
    """

    provider = ProviderTag.OPENAI

    def __init__(
        self,
        config: Optional[AdapterConfig] = None,
        client_factory: Optional[ClientFactory] = None,
    ):
        self._cfg = config or AdapterConfig()
        self._client_factory = client_factory or _default_client

    def _messages(self, prompt: str) -> list[LLMMessage]:
        return [
            LLMMessage(role="system", content=SYSTEM_INSTRUCTION),
            LLMMessage(role="user", content=prompt),
        ]

    def _request(self, prompt: str, model: ModelDescriptor) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "model": model.request_model,
            "messages": [
                {"role": m.role, "content": m.content} for m in self._messages(prompt)
            ],
            "temperature": self._cfg.temperature,
            "timeout": self._cfg.timeout_s,
        }
        if model.json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        return kwargs

    def invoke(self, prompt: str, model: ModelDescriptor, credential: str) -> str:
        def _call() -> Any:
            client = self._client_factory(credential, self._cfg.timeout_s)
            return client.chat.completions.create(**self._request(prompt, model))

        log.debug(
            f"OpenAI chat completion model={model.request_model} "
            f"json_mode={model.json_mode}"
        )
        resp = call_provider(self.provider, credential, _call)

        choice = first_item(getattr(resp, "choices", None), self.provider, "choices")
        message = getattr(choice, "message", None)
        return require_text(
            getattr(message, "content", None), self.provider, "message content"
        )
