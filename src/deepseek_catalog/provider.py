"""
Builders that turn catalog entries into registry records.

Both builders are pure: they read only the module-level catalog constants
and return freshly allocated records on every call.
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import InvalidModelRefError
from .models import (
    DEEPSEEK_API,
    DEEPSEEK_BASE_URL,
    DEEPSEEK_DEFAULT_COST,
    DEEPSEEK_MODEL_CATALOG,
    CatalogEntry,
)
from .types import ModelDefinition, ProviderDescriptor


def build_model_definition(entry: CatalogEntry) -> ModelDefinition:
    """
    Project one catalog entry into a model definition.

    The returned `input` list is a new container; the cost record is the
    shared immutable `DEEPSEEK_DEFAULT_COST`.
    """
    return ModelDefinition(
        id=entry.id,
        name=entry.name,
        reasoning=entry.reasoning,
        input=list(entry.input),
        cost=DEEPSEEK_DEFAULT_COST,
        context_window=entry.context_window,
        max_tokens=entry.max_tokens,
    )


def build_provider() -> ProviderDescriptor:
    """Assemble the DeepSeek provider descriptor, one model per catalog entry."""
    return ProviderDescriptor(
        base_url=DEEPSEEK_BASE_URL,
        api=DEEPSEEK_API,
        models=[build_model_definition(entry) for entry in DEEPSEEK_MODEL_CATALOG],
    )


@dataclass(frozen=True)
class ModelRef:
    """A provider-qualified model reference such as ``deepseek/deepseek-chat``."""

    provider: str
    model: str

    def __str__(self) -> str:
        return format_model_ref(self.provider, self.model)


def format_model_ref(provider: str, model: str) -> str:
    return f"{provider}/{model}"


def parse_model_ref(ref: str) -> ModelRef:
    """
    Split a qualified reference on its first ``/``.

    Model ids may themselves contain slashes, so only the first one separates
    the provider namespace.

    Raises:
        InvalidModelRefError: If the slash is missing or either side is empty.
    """
    cleaned = ref.strip()
    provider, sep, model = cleaned.partition("/")
    if not sep:
        raise InvalidModelRefError(ref, "missing '/' between provider and model id")
    if not provider:
        raise InvalidModelRefError(ref, "provider namespace is empty")
    if not model:
        raise InvalidModelRefError(ref, "model id is empty")
    return ModelRef(provider=provider, model=model)


__all__ = [
    "build_model_definition",
    "build_provider",
    "ModelRef",
    "format_model_ref",
    "parse_model_ref",
]
