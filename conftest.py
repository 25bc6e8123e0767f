"""Workspace-level pytest configuration and fixtures."""

import pytest


@pytest.fixture(autouse=True, scope="function")
def isolate_registry_environment(monkeypatch: pytest.MonkeyPatch):
    """Automatically remove registry environment overrides for each test.

    RegistryConfiguration falls back to SERVICE_REGISTRY_CONFIG_FILE, so a
    value set in the developer's shell would otherwise leak into tests.
    """
    monkeypatch.delenv("SERVICE_REGISTRY_CONFIG_FILE", raising=False)
    yield
