"""
Pytest configuration and fixtures.

This file provides pytest-specific configuration and fixtures.
For standard test utilities, see tests/__init__.py
"""

import pytest


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "db: marks tests as using the database layer (deselect with '-m \"not db\"')"
    )


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep configuration overrides from the host environment out of tests."""
    for name in ('DATABASE_URL', 'WEB_HOST', 'WEB_PORT', 'MATCH_MAX_WORKERS',
                 'MATCH_TIMEOUT_SECONDS', 'TALENTMATCH_CONFIG'):
        monkeypatch.delenv(name, raising=False)
