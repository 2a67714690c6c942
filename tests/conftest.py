"""pytest global fixtures: isolate aggregation settings from the environment."""

import pytest


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Tests never see aggregation settings from the developer's shell or .env."""
    monkeypatch.delenv("BLACKOUT_FALLBACK", raising=False)
    monkeypatch.delenv("TOP_VIBES_LIMIT", raising=False)
    monkeypatch.delenv("AGGREGATION_DIAGNOSTICS", raising=False)
    yield
