"""Pytest configuration and shared fixtures."""

import pytest

from edgee.config.schema import EdgeeConfig


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch, tmp_path):
    """Keep tests independent of the caller's environment and config file."""
    monkeypatch.delenv("EDGEE_API_KEY", raising=False)
    monkeypatch.delenv("EDGEE_BASE_URL", raising=False)
    monkeypatch.setattr("edgee.config.loader.DEFAULT_CONFIG_PATH", tmp_path / "missing.yaml")


@pytest.fixture
def config() -> EdgeeConfig:
    """Provide a resolved configuration for tests."""
    return EdgeeConfig(api_key="test-api-key-12345")
