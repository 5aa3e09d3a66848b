"""Fetch available models from the DeepSeek API and diff them against the catalog."""

from __future__ import annotations

import sys
from typing import Any, List

import requests  # type: ignore[import-untyped]

from deepseek_catalog.drift import compare_remote_models
from deepseek_catalog.env import DEEPSEEK_API_KEY_ENV, get_api_key
from deepseek_catalog.models import DEEPSEEK_BASE_URL


def fetch_deepseek_model_ids(api_key: str, timeout: float = 30.0) -> List[str]:
    """Return the model ids served by ``GET {base_url}/models``."""
    headers = {"Authorization": f"Bearer {api_key}"}
    response = requests.get(f"{DEEPSEEK_BASE_URL}/models", headers=headers, timeout=timeout)
    response.raise_for_status()
    models: list[dict[str, Any]] = response.json()["data"]
    return sorted(m["id"] for m in models)


def main() -> int:
    api_key = get_api_key()
    if not api_key:
        print(f"Skipping DeepSeek (no key, set {DEEPSEEK_API_KEY_ENV})")
        return 0

    try:
        remote_ids = fetch_deepseek_model_ids(api_key)
    except requests.RequestException as e:
        print(f"Error fetching DeepSeek models: {e}")
        return 1

    print("\n=== DeepSeek Models ===")
    for model_id in remote_ids:
        print(model_id)

    drift = compare_remote_models(remote_ids)
    print("\n=== Catalog Drift ===")
    print(drift.summary())
    return 0 if drift.in_sync else 2


if __name__ == "__main__":
    sys.exit(main())
