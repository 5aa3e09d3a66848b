"""
Canonical model catalog for the DeepSeek provider.

This module serves as the single source of truth for the DeepSeek model
variants: display names, reasoning capability, supported inputs, context
window and output limits, and the shared cost record. Use the typed
constants for IDE autocomplete.

Example:
    >>> from deepseek_catalog.models import DeepSeek
    >>> model = DeepSeek.REASONER
    >>> print(f"{model.name}: {model.context_window} tokens, reasoning={model.reasoning}")
"""

from __future__ import annotations

import difflib
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .exceptions import CatalogValidationError, UnknownModelError
from .types import ModelApi, ModelCost, ModelInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogEntry:
    """
    Metadata for one DeepSeek model variant.

    Attributes:
        id: Model identifier sent to the API (e.g., "deepseek-chat")
        name: Human-readable display name
        reasoning: Whether the model thinks step by step before answering
        input: Supported input modalities, in order
        context_window: Maximum prompt + completion length in tokens
        max_tokens: Maximum output tokens per request
    """

    id: str
    name: str
    reasoning: bool
    input: Tuple[ModelInput, ...]
    context_window: int
    max_tokens: int


# =============================================================================
# Provider constants
# =============================================================================

DEEPSEEK_PROVIDER = "deepseek"
DEEPSEEK_BASE_URL = "https://api.deepseek.com"
DEEPSEEK_API: ModelApi = "openai-completions"
DEEPSEEK_DEFAULT_MODEL_ID = "deepseek-chat"
DEEPSEEK_DEFAULT_MODEL_REF = f"{DEEPSEEK_PROVIDER}/{DEEPSEEK_DEFAULT_MODEL_ID}"

# Usage is unmetered in this catalog.
DEEPSEEK_DEFAULT_COST = ModelCost(input=0, output=0, cache_read=0, cache_write=0)


# =============================================================================
# DeepSeek Models (2 total)
# =============================================================================


class DeepSeek:
    """DeepSeek chat models with limits and capabilities."""

    CHAT = CatalogEntry(
        id="deepseek-chat",
        name="DeepSeek Chat",
        reasoning=False,
        input=("text",),
        context_window=64000,
        max_tokens=8192,
    )
    REASONER = CatalogEntry(
        id="deepseek-reasoner",
        name="DeepSeek Reasoner (思考模式)",
        reasoning=True,
        input=("text",),
        context_window=64000,
        max_tokens=8192,
    )


DEEPSEEK_MODEL_CATALOG: Tuple[CatalogEntry, ...] = (DeepSeek.CHAT, DeepSeek.REASONER)
"""Ordered, immutable catalog. Builders preserve this order."""


# =============================================================================
# Validation
# =============================================================================


def validate_catalog(entries: Iterable[CatalogEntry]) -> None:
    """
    Check catalog invariants, raising on the first violation.

    Checks that every id is non-empty and unique, that at least one input
    modality is listed, that numeric limits are non-negative, and that
    max_tokens fits inside context_window.

    Raises:
        CatalogValidationError: If any entry breaks an invariant.
    """
    seen: set[str] = set()
    for entry in entries:
        if not entry.id:
            raise CatalogValidationError(entry_id=repr(entry.id), field="id", issue="id is empty")
        if entry.id in seen:
            raise CatalogValidationError(
                entry_id=entry.id, field="id", issue="duplicate id in catalog"
            )
        seen.add(entry.id)

        if not entry.input:
            raise CatalogValidationError(
                entry_id=entry.id, field="input", issue="at least one input modality is required"
            )
        for field_name in ("context_window", "max_tokens"):
            value = getattr(entry, field_name)
            if not value >= 0:
                raise CatalogValidationError(
                    entry_id=entry.id,
                    field=field_name,
                    issue=f"must be non-negative; received {value}",
                )
        if entry.max_tokens > entry.context_window:
            raise CatalogValidationError(
                entry_id=entry.id,
                field="max_tokens",
                issue=(
                    f"max_tokens ({entry.max_tokens}) exceeds "
                    f"context_window ({entry.context_window})"
                ),
            )


validate_catalog(DEEPSEEK_MODEL_CATALOG)
logger.debug("Validated DeepSeek catalog with %d models", len(DEEPSEEK_MODEL_CATALOG))


# =============================================================================
# Aggregated Model Lists
# =============================================================================

ALL_MODELS: List[CatalogEntry] = list(DEEPSEEK_MODEL_CATALOG)
"""All DeepSeek models, in catalog order."""

MODELS_BY_ID: Dict[str, CatalogEntry] = {model.id: model for model in DEEPSEEK_MODEL_CATALOG}
"""Quick lookup dictionary mapping model ID to CatalogEntry."""


def get_model(model_id: str) -> CatalogEntry:
    """
    Look up a catalog entry by id.

    Raises:
        UnknownModelError: If the id is not in the catalog. The error lists
            the closest known ids.
    """
    try:
        return MODELS_BY_ID[model_id]
    except KeyError:
        matches = difflib.get_close_matches(model_id, list(MODELS_BY_ID), n=3, cutoff=0.6)
        raise UnknownModelError(model_id, suggestions=matches) from None


__all__ = [
    "CatalogEntry",
    "DeepSeek",
    "DEEPSEEK_PROVIDER",
    "DEEPSEEK_BASE_URL",
    "DEEPSEEK_API",
    "DEEPSEEK_DEFAULT_MODEL_ID",
    "DEEPSEEK_DEFAULT_MODEL_REF",
    "DEEPSEEK_DEFAULT_COST",
    "DEEPSEEK_MODEL_CATALOG",
    "ALL_MODELS",
    "MODELS_BY_ID",
    "validate_catalog",
    "get_model",
]
