"""
Unit Test Fixtures.

Fixtures for unit tests - all external dependencies are mocked.
Unit tests should be fast and isolated, never touching a real Grafana.
"""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest


# =============================================================================
# Dashboard File Fixtures
# =============================================================================


@pytest.fixture
def dashboard_document() -> dict:
    """A minimal dashboard document as stored on disk."""
    return {"dashboard": {"id": 123, "version": 1}}


@pytest.fixture
def dashboard_file(tmp_path: Path, dashboard_document: dict) -> Path:
    """
    Dashboard document written to a temporary JSON file.

    Usage:
        async def test_push(dashboard_file):
            await service.push(dashboard_file)
    """
    path = tmp_path / "dashboard.json"
    path.write_text(json.dumps(dashboard_document), encoding="utf-8")
    return path


# =============================================================================
# Logging Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """
    Mock logger for testing logging calls.

    Usage:
        def test_logging(mock_logger):
            log_with_source(mock_logger, "cli", "info", "Message")
            mock_logger.info.assert_called_once()
    """
    logger = MagicMock()
    logger.debug = MagicMock()
    logger.info = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.exception = MagicMock()
    return logger
