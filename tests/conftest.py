"""
Shared pytest configuration and fixtures for flyway-config tests.

This file contains:
- Common test fixtures used across test modules
- Markers for different test categories
- Environment isolation so FLYWAY_* variables never leak into tests
"""

import os
from pathlib import Path
import sys
from unittest.mock import patch

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
# Test-only callbacks and resolvers are loaded by class name
sys.path.insert(0, str(Path(__file__).parent))

from flyway_config import Configuration, Edition  # noqa: E402


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Tests that read files or the environment")


def pytest_collection_modifyitems(config, items):
    """Add markers based on the test module."""
    for item in items:
        if any(name in str(item.fspath) for name in ("test_files", "test_loader", "test_environment")):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def isolated_environment():
    """Strip FLYWAY_* variables from the process environment for every test."""
    clean = {name: value for name, value in os.environ.items() if not name.startswith("FLYWAY_")}
    with patch.dict(os.environ, clean, clear=True):
        yield


@pytest.fixture()
def configuration():
    """Provide a fresh Community edition configuration."""
    return Configuration()


@pytest.fixture()
def teams_configuration():
    """Provide a fresh Teams edition configuration."""
    return Configuration(edition=Edition.TEAMS)


@pytest.fixture()
def sample_properties():
    """Provide a realistic property mapping as read from flyway.conf."""
    return {
        "flyway.url": "jdbc:postgresql://localhost:5432/app",
        "flyway.user": "app",
        "flyway.password": "s3cret",
        "flyway.schemas": "app, audit",
        "flyway.locations": "filesystem:sql,classpath:db/migration",
        "flyway.table": "schema_history",
        "flyway.connectRetries": "3",
        "flyway.baselineOnMigrate": "true",
        "flyway.baselineVersion": "2.1",
        "flyway.placeholders.env": "prod",
        "flyway.placeholders.region": "eu-west-1",
    }
