"""
Custom exceptions with helpful error messages and suggestions.

Every error raised by the catalog carries:
- A clear explanation of what went wrong
- The offending model id, reference or field
- A concrete suggestion where one exists
"""

from __future__ import annotations

from typing import List, Optional


class DeepSeekCatalogError(Exception):
    """Base exception for all deepseek_catalog errors."""

    pass


class CatalogValidationError(DeepSeekCatalogError):
    """Raised when a catalog entry or cost record is malformed."""

    def __init__(self, entry_id: str, field: str, issue: str):
        self.entry_id = entry_id
        self.field = field
        self.issue = issue

        message = f"\n{'='*60}\n"
        message += f"❌ Catalog Validation Error: '{entry_id}'\n"
        message += f"{'='*60}\n\n"
        message += f"Field: {field}\n"
        message += f"Issue: {issue}\n"
        message += f"\n💡 Fix the entry in deepseek_catalog/models.py before importing.\n"
        message += f"\n{'='*60}\n"

        super().__init__(message)


class UnknownModelError(DeepSeekCatalogError, KeyError):
    """Raised when a model id is not present in the catalog."""

    def __init__(self, model_id: str, suggestions: Optional[List[str]] = None):
        self.model_id = model_id
        self.suggestions = list(suggestions or [])

        message = f"\n{'='*60}\n"
        message += f"❌ Unknown Model: '{model_id}'\n"
        message += f"{'='*60}\n\n"
        if self.suggestions:
            message += f"💡 Did you mean: {', '.join(self.suggestions)}?\n"
        else:
            message += f"💡 Run `deepseek-catalog list-models` to see known models.\n"
        message += f"\n{'='*60}\n"

        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message and escape the newlines.
        return self.message


class InvalidModelRefError(DeepSeekCatalogError, ValueError):
    """Raised when a qualified model reference cannot be parsed."""

    def __init__(self, ref: str, issue: str):
        self.ref = ref
        self.issue = issue

        message = f"\n{'='*60}\n"
        message += f"❌ Invalid Model Reference: '{ref}'\n"
        message += f"{'='*60}\n\n"
        message += f"Issue: {issue}\n"
        message += f"\n💡 Expected format: <provider>/<model-id>, e.g. 'deepseek/deepseek-chat'\n"
        message += f"\n{'='*60}\n"

        super().__init__(message)


__all__ = [
    "DeepSeekCatalogError",
    "CatalogValidationError",
    "UnknownModelError",
    "InvalidModelRefError",
]
