"""
Shared pytest fixtures.
"""
import pytest

from archsetup import config


@pytest.fixture(autouse=True)
def isolate_user_config(tmp_path, monkeypatch):
    """Keep the developer's own ~/.config/archsetup/config.toml out of tests."""
    monkeypatch.setattr(config, "_CONFIG_PATH", tmp_path / "no-config.toml")
