"""Shared pytest fixtures for Human Logic tests."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from humanlogic.category import CATEGORIES, Category
from humanlogic.logic import Logic


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: tests crossing the CLI or HTTP boundary")


def biased(category: Category, high: float = 0.4, low: float = 0.15) -> Logic:
    """Vector leaning towards category: high weight there, low weight elsewhere."""
    return Logic.from_array(high if item is category else low for item in CATEGORIES)


@pytest.fixture
def biased_logic():
    return biased


@pytest.fixture
def api_client():
    from fastapi.testclient import TestClient

    from humanlogic.main import create_app
    from humanlogic.config import Settings

    return TestClient(create_app(Settings()))


@pytest.fixture
def cli_runner():
    from typer.testing import CliRunner

    return CliRunner()
