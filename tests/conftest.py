"""Pytest configuration for the collection test suite."""

import os

import pytest

from collection import Env, Log


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test with no config file, no COLLECTION_ vars and fresh logs."""
    for name in list(os.environ):
        if name.startswith(Env.VAR_PREFIX):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    Env.reset()
    saved_logs = dict(Log._logs)
    saved_bad = set(Log._badLevels)
    Log._logs.clear()
    Log._badLevels.clear()
    yield tmp_path
    Env.reset()
    Log._logs.clear()
    Log._logs.update(saved_logs)
    Log._badLevels.clear()
    Log._badLevels.update(saved_bad)


@pytest.fixture
def config_props(isolated_env):
    """Write etc/collection/config.props in the test's work dir."""

    def write(text: str):
        etc = isolated_env / "etc" / "collection"
        etc.mkdir(parents=True, exist_ok=True)
        (etc / "config.props").write_text(text, encoding="utf-8")
        Env.reset()

    return write
