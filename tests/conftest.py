"""Pytest configuration and shared fixtures for all tests."""

import sys
from pathlib import Path

import pytest
from loguru import logger

# Добавить корень проекта в PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from commission.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Isolate tests from COMMISSION_* variables of the host environment."""
    for name in (
        "COMMISSION_LEVEL1_RATE",
        "COMMISSION_LEVEL2_RATE",
        "COMMISSION_LEVEL3_RATE",
        "COMMISSION_CASHBACK_RATE",
        "COMMISSION_LOG_LEVEL",
        "COMMISSION_LOG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(project_root)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_records():
    """Collect loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
