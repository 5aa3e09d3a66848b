"""Public exports for the deepseek_catalog package."""

from .drift import CatalogDrift, compare_remote_models
from .exceptions import (
    CatalogValidationError,
    DeepSeekCatalogError,
    InvalidModelRefError,
    UnknownModelError,
)
from .models import (
    ALL_MODELS,
    DEEPSEEK_API,
    DEEPSEEK_BASE_URL,
    DEEPSEEK_DEFAULT_COST,
    DEEPSEEK_DEFAULT_MODEL_ID,
    DEEPSEEK_DEFAULT_MODEL_REF,
    DEEPSEEK_MODEL_CATALOG,
    DEEPSEEK_PROVIDER,
    MODELS_BY_ID,
    CatalogEntry,
    DeepSeek,
    get_model,
    validate_catalog,
)
from .pricing import PRICING, calculate_cost, get_model_pricing
from .provider import (
    ModelRef,
    build_model_definition,
    build_provider,
    format_model_ref,
    parse_model_ref,
)
from .types import ModelApi, ModelCost, ModelDefinition, ModelInput, ProviderDescriptor

__all__ = [
    # Catalog
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
    "get_model",
    "validate_catalog",
    # Registry records
    "ModelApi",
    "ModelInput",
    "ModelCost",
    "ModelDefinition",
    "ProviderDescriptor",
    # Builders
    "build_model_definition",
    "build_provider",
    "ModelRef",
    "format_model_ref",
    "parse_model_ref",
    # Pricing
    "PRICING",
    "calculate_cost",
    "get_model_pricing",
    # Drift
    "CatalogDrift",
    "compare_remote_models",
    # Exceptions
    "DeepSeekCatalogError",
    "CatalogValidationError",
    "UnknownModelError",
    "InvalidModelRefError",
]
