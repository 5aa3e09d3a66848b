"""
Shared pytest setup for deepseek_catalog.

Live checks against api.deepseek.com are marked ``e2e``. They only run with
``--run-e2e`` and receive the key through the ``deepseek_api_key`` fixture.
"""

from __future__ import annotations

import pytest

from deepseek_catalog.env import DEEPSEEK_API_KEY_ENV, get_api_key


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("deepseek")
    group.addoption(
        "--run-e2e",
        action="store_true",
        default=False,
        help=f"Run tests that call the live DeepSeek API (needs {DEEPSEEK_API_KEY_ENV})",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "e2e: calls the live DeepSeek API")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if config.getoption("--run-e2e"):
        return
    skip_live = pytest.mark.skip(reason="live DeepSeek API tests need --run-e2e")
    for item in items:
        if item.get_closest_marker("e2e") is not None:
            item.add_marker(skip_live)


@pytest.fixture
def deepseek_api_key() -> str:
    """API key for e2e tests; skips the test when none is configured."""
    api_key = get_api_key()
    if api_key is None:
        pytest.skip(f"{DEEPSEEK_API_KEY_ENV} not set")
    return api_key
