# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Pytest configuration and shared fixtures.

This module provides test fixtures that are shared across the test suite.

Assumptions:
- Each test gets a fresh application and TestClient
- Tests that hash with omitted options use cheap_defaults unless they check
  the real defaults
- No fixture shares state between tests
"""
import pytest
from fastapi.testclient import TestClient

from passhash.config import settings

# Cheapest parameters each primitive accepts
CHEAP_ARGON2_OPTIONS = {"time_cost": 1, "memory_cost": 8, "parallelism": 1}
CHEAP_BCRYPT_OPTIONS = {"work_factor": 4}


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of single modules")
    config.addinivalue_line("markers", "integration: tests through the HTTP API")
    config.addinivalue_line("markers", "hypothesis: property-based tests")


@pytest.fixture
def app():
    """Create a FastAPI application instance for testing.

    Returns:
        FastAPI: Application instance built from current settings
    """
    from passhash.main import create_app
    return create_app()


@pytest.fixture
def client(app):
    """Create a test client for the application.

    Returns:
        TestClient: FastAPI test client
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def cheap_defaults(monkeypatch):
    """Lower the default algorithm costs for the duration of a test.

    Assumptions:
    - Defaults are read from settings at request time
    - monkeypatch restores the real values afterwards
    """
    monkeypatch.setattr(settings, "argon2_time_cost", 1)
    monkeypatch.setattr(settings, "argon2_memory_cost", 8)
    monkeypatch.setattr(settings, "argon2_parallelism", 1)
    monkeypatch.setattr(settings, "bcrypt_work_factor", 4)
    return settings


@pytest.fixture
def argon2_options():
    return dict(CHEAP_ARGON2_OPTIONS)


@pytest.fixture
def bcrypt_options():
    return dict(CHEAP_BCRYPT_OPTIONS)
