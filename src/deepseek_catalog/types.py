"""
Record shapes exchanged with the model and provider registries.

`ModelDefinition` and `ProviderDescriptor` are what registry code consumes;
their `to_dict()` methods emit the camelCase keys those registries expect.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal

from .exceptions import CatalogValidationError

ModelApi = Literal[
    "openai-completions",
    "openai-responses",
    "anthropic-messages",
    "google-generative-ai",
    "github-copilot",
    "bedrock-converse-stream",
]

ModelInput = Literal["text", "image"]


@dataclass(frozen=True)
class ModelCost:
    """
    Per-token pricing for one model.

    Attributes:
        input: Cost in USD per 1M input tokens
        output: Cost in USD per 1M output tokens
        cache_read: Cost in USD per 1M tokens served from the prompt cache
        cache_write: Cost in USD per 1M tokens written to the prompt cache
    """

    input: float = 0.0
    output: float = 0.0
    cache_read: float = 0.0
    cache_write: float = 0.0

    def __post_init__(self) -> None:
        for name in ("input", "output", "cache_read", "cache_write"):
            value = getattr(self, name)
            if not value >= 0:
                raise CatalogValidationError(
                    entry_id="<cost>",
                    field=name,
                    issue=f"must be non-negative; received {value}",
                )

    def to_dict(self) -> Dict[str, float]:
        return {
            "input": self.input,
            "output": self.output,
            "cacheRead": self.cache_read,
            "cacheWrite": self.cache_write,
        }


@dataclass
class ModelDefinition:
    """
    Normalized model record handed to the model registry.

    `input` is always a list owned by this record, never the catalog's tuple,
    so callers may mutate it freely.
    """

    id: str
    name: str
    reasoning: bool
    input: List[ModelInput]
    cost: ModelCost
    context_window: int
    max_tokens: int

    def to_dict(self) -> Dict[str, Any]:
        """Return the registry contract as plain JSON-safe data."""
        return {
            "id": self.id,
            "name": self.name,
            "reasoning": self.reasoning,
            "input": list(self.input),
            "cost": self.cost.to_dict(),
            "contextWindow": self.context_window,
            "maxTokens": self.max_tokens,
        }


@dataclass
class ProviderDescriptor:
    """Connection info plus the model list handed to the provider registry."""

    base_url: str
    api: ModelApi
    models: List[ModelDefinition] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "baseUrl": self.base_url,
            "api": self.api,
            "models": [model.to_dict() for model in self.models],
        }


__all__ = ["ModelApi", "ModelInput", "ModelCost", "ModelDefinition", "ProviderDescriptor"]
