from __future__ import annotations

from typing import Dict, Optional

from .anthropic_client import AnthropicAdapter
from .base import AdapterConfig, ProviderAdapter
from .errors import LLMError
from .gemini_client import GeminiAdapter
from .openai_client import OpenAIAdapter
from .replicate_client import ReplicateAdapter
from .types import ProviderTag

ADAPTER_TYPES = {
    ProviderTag.OPENAI: OpenAIAdapter,
    ProviderTag.GOOGLE: GeminiAdapter,
    ProviderTag.ANTHROPIC: AnthropicAdapter,
    ProviderTag.REPLICATE: ReplicateAdapter,
}


def build_adapter(
    provider: ProviderTag | str, *, config: Optional[AdapterConfig] = None
) -> ProviderAdapter:
    """Factory for provider adapters.

    Providers:
    - openai (chat completions)
    - google (Gemini generate_content)
    - anthropic (messages)
    - replicate (hosted model run)

    Extend by adding an adapter module and mapping its ProviderTag here.
    """

    try:
        tag = ProviderTag(str(getattr(provider, "value", provider)).lower().strip())
    except ValueError:
        raise LLMError(f"Unknown LLM provider: {provider}") from None
    return ADAPTER_TYPES[tag](config)


def build_adapters(
    *, config: Optional[AdapterConfig] = None
) -> Dict[ProviderTag, ProviderAdapter]:
    """One adapter per ProviderTag; the mapping is total."""

    return {tag: build_adapter(tag, config=config) for tag in ProviderTag}
