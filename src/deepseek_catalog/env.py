"""
Lightweight environment variable loader for local development.

Only maintainer tooling reads the environment; the catalog itself is
configured entirely through module constants.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Iterable

logger = logging.getLogger(__name__)

DEEPSEEK_API_KEY_ENV = "DEEPSEEK_API_KEY"


def parse_env_text(text: str) -> Dict[str, str]:
    """
    Parse ``KEY=value`` lines from .env-style text.

    Blank lines, ``#`` comments and lines without ``=`` are skipped. An
    ``export `` prefix is dropped, and one pair of matching quotes around the
    value is removed.
    """
    pairs: Dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        if stripped.startswith("export "):
            stripped = stripped[len("export ") :].lstrip()
        key, value = (part.strip() for part in stripped.split("=", 1))
        if not key:
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        pairs[key] = value
    return pairs


def load_env_if_present(candidate_paths: Iterable[Path]) -> None:
    """
    Load the first readable .env-style file into ``os.environ``.

    Variables already set in the environment are never overwritten. Files that
    are missing, unreadable or not valid UTF-8 are skipped.
    """
    for env_path in candidate_paths:
        if not env_path.is_file():
            continue
        try:
            text = env_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Skipping env file %s: %s", env_path, exc)
            continue
        for key, value in parse_env_text(text).items():
            os.environ.setdefault(key, value)
        logger.debug("Loaded env file %s", env_path)
        return


def load_default_env() -> None:
    """Load from cwd/.env, falling back to the project root .env."""
    project_root = Path(__file__).resolve().parents[2]
    load_env_if_present([Path.cwd() / ".env", project_root / ".env"])


def get_api_key() -> str | None:
    """Return the DeepSeek API key after loading any local .env file."""
    load_default_env()
    value = os.getenv(DEEPSEEK_API_KEY_ENV, "").strip()
    return value or None


__all__ = [
    "DEEPSEEK_API_KEY_ENV",
    "parse_env_text",
    "load_default_env",
    "load_env_if_present",
    "get_api_key",
]
