"""
Pricing table for the DeepSeek provider.

This module derives pricing from the canonical catalog (models.py).
Prices are in USD per 1M tokens. Every catalog model currently shares the
zero-cost record, so estimates come out at $0.00 until real rates are
added to the catalog.
"""

from __future__ import annotations

import logging
from typing import Dict

from .models import ALL_MODELS, DEEPSEEK_DEFAULT_COST

logger = logging.getLogger(__name__)

# Keys follow the registry's camelCase cost contract.
PRICING: Dict[str, Dict[str, float]] = {
    model.id: DEEPSEEK_DEFAULT_COST.to_dict() for model in ALL_MODELS
}


def calculate_cost(
    model: str,
    prompt_tokens: int,
    completion_tokens: int,
    cache_read_tokens: int = 0,
    cache_write_tokens: int = 0,
) -> float:
    """
    Calculate cost in USD for given token usage.

    Args:
        model: Model id (e.g., "deepseek-chat").
        prompt_tokens: Number of uncached prompt/input tokens.
        completion_tokens: Number of completion/output tokens.
        cache_read_tokens: Number of prompt tokens served from cache.
        cache_write_tokens: Number of prompt tokens written to cache.

    Returns:
        Estimated cost in USD, using the rates in PRICING. Returns 0.0 if
        the model has no PRICING entry.

    Raises:
        ValueError: If any token count is negative.
    """
    counts = {
        "prompt_tokens": prompt_tokens,
        "completion_tokens": completion_tokens,
        "cache_read_tokens": cache_read_tokens,
        "cache_write_tokens": cache_write_tokens,
    }
    for name, value in counts.items():
        if value < 0:
            raise ValueError(f"{name} must be non-negative; received {value}")

    if model not in PRICING:
        logger.warning(
            f"⚠️  Unknown model '{model}' - cannot calculate cost. "
            f"Returning $0.00. Add model to deepseek_catalog/models.py if known."
        )
        return 0.0

    rates = PRICING[model]
    return (
        (prompt_tokens / 1_000_000) * rates["input"]
        + (completion_tokens / 1_000_000) * rates["output"]
        + (cache_read_tokens / 1_000_000) * rates["cacheRead"]
        + (cache_write_tokens / 1_000_000) * rates["cacheWrite"]
    )


def get_model_pricing(model: str) -> Dict[str, float] | None:
    """
    Get pricing information for a specific model.

    Returns:
        Dictionary with 'input', 'output', 'cacheRead' and 'cacheWrite'
        prices per 1M tokens, or None if the model is not found.
    """
    pricing = PRICING.get(model)
    return dict(pricing) if pricing is not None else None


__all__ = ["PRICING", "calculate_cost", "get_model_pricing"]
