"""Static registry of the models a request may target."""

from __future__ import annotations

from typing import Dict, List, Union

from .errors import UnknownModelError
from .types import NOT_FOUND, ModelDescriptor, NotFound, ProviderInfo, ProviderTag

_MODELS = (
    ModelDescriptor("gemini-1.5", "Gemini 1.5", ProviderTag.GOOGLE, "gemini-1.5-pro"),
    ModelDescriptor("gemini-1.5-flash", "Gemini 1.5 Flash", ProviderTag.GOOGLE),
    ModelDescriptor("gpt-3.5-turbo", "GPT-3.5 Turbo", ProviderTag.OPENAI, json_mode=True),
    # gpt-4 (0613) rejects response_format=json_object.
    ModelDescriptor("gpt-4", "GPT-4", ProviderTag.OPENAI),
    ModelDescriptor(
        "claude-3-opus",
        "Claude 3",
        ProviderTag.ANTHROPIC,
        "claude-3-opus-20240229",
    ),
    ModelDescriptor(
        "meta/llama-2-70b-chat",
        "Llama 3",
        ProviderTag.REPLICATE,
        "meta/llama-2-70b-chat:02e509c789964a7ea8736978a43525956ef40397be9033abf9fd2badfe68c9e3",
    ),
)

MODEL_CATALOG: Dict[str, ModelDescriptor] = {m.identifier: m for m in _MODELS}

PROVIDERS: Dict[ProviderTag, ProviderInfo] = {
    ProviderTag.GOOGLE: ProviderInfo(
        ProviderTag.GOOGLE, "Gemini Models", "Google AI API Key", "AIza..."
    ),
    ProviderTag.OPENAI: ProviderInfo(
        ProviderTag.OPENAI, "OpenAI Models", "OpenAI API Key", "sk-..."
    ),
    ProviderTag.ANTHROPIC: ProviderInfo(
        ProviderTag.ANTHROPIC, "Anthropic Models", "Anthropic API Key", "sk-ant-..."
    ),
    ProviderTag.REPLICATE: ProviderInfo(
        ProviderTag.REPLICATE, "Llama Models", "Replicate API Key", "r8_..."
    ),
}

GENERIC_CREDENTIAL_LABEL = "API Key"
GENERIC_CREDENTIAL_PLACEHOLDER = "Enter API key..."


def lookup(identifier: str) -> Union[ModelDescriptor, NotFound]:
    return MODEL_CATALOG.get(identifier, NOT_FOUND)


def get_model(identifier: str) -> ModelDescriptor:
    model = lookup(identifier)
    if isinstance(model, NotFound):
        raise UnknownModelError(identifier)
    return model


def list_models() -> List[ModelDescriptor]:
    return list(_MODELS)


def models_by_provider() -> Dict[ProviderTag, List[ModelDescriptor]]:
    """Catalog grouped for display, in catalog order within each group."""
    grouped: Dict[ProviderTag, List[ModelDescriptor]] = {tag: [] for tag in ProviderTag}
    for m in _MODELS:
        grouped[m.provider].append(m)
    return grouped


def provider_info(tag: ProviderTag) -> ProviderInfo:
    return PROVIDERS[tag]


def credential_hint(identifier: str) -> tuple[str, str]:
    """(label, placeholder) for the credential field of the selected model."""
    model = lookup(identifier)
    if isinstance(model, NotFound):
        return GENERIC_CREDENTIAL_LABEL, GENERIC_CREDENTIAL_PLACEHOLDER
    info = PROVIDERS[model.provider]
    return info.credential_label, info.credential_placeholder
