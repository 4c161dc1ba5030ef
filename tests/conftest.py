from pathlib import Path

import pytest


@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def no_system_paths(monkeypatch):
    """Hide every absolute candidate so only paths under tmp dirs can exist."""
    import appcheck.discovery.prober as prober

    real_exists = prober.path_exists

    def fake_exists(path):
        if str(path).startswith(("/Applications", "/opt/local")):
            return False
        return real_exists(path)

    monkeypatch.setattr(prober, "path_exists", fake_exists)
