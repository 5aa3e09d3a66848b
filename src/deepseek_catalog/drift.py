"""
Compare the static catalog against the model ids a live API reports.

The fetch itself lives in ``scripts/fetch_models.py``; this module only
diffs id lists so it stays free of network access.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from .models import DEEPSEEK_MODEL_CATALOG, CatalogEntry


@dataclass
class CatalogDrift:
    """
    Differences between the catalog and a remote model listing.

    Attributes:
        missing_locally: Ids the API serves that the catalog lacks (sorted).
        missing_remotely: Catalog ids the API no longer serves (catalog order).
    """

    missing_locally: List[str] = field(default_factory=list)
    missing_remotely: List[str] = field(default_factory=list)

    @property
    def in_sync(self) -> bool:
        return not self.missing_locally and not self.missing_remotely

    def summary(self) -> str:
        if self.in_sync:
            return "Catalog is in sync with the API."
        lines = []
        for model_id in self.missing_locally:
            lines.append(f"+ {model_id} (served by API, not in catalog)")
        for model_id in self.missing_remotely:
            lines.append(f"- {model_id} (in catalog, not served by API)")
        return "\n".join(lines)


def compare_remote_models(
    remote_ids: Iterable[str],
    catalog: Sequence[CatalogEntry] = DEEPSEEK_MODEL_CATALOG,
) -> CatalogDrift:
    remote = set(remote_ids)
    local = [entry.id for entry in catalog]
    return CatalogDrift(
        missing_locally=sorted(remote.difference(local)),
        missing_remotely=[model_id for model_id in local if model_id not in remote],
    )


__all__ = ["CatalogDrift", "compare_remote_models"]
