"""Shared fixtures for lingograde tests."""

from __future__ import annotations

import pytest
import yaml

from lingograde.config.settings import TOLERANCE_ENV, Settings
from lingograde.engine.evaluator import Evaluator
from lingograde.server.handler import ServerHandler


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's tolerance override out of the tests."""
    monkeypatch.delenv(TOLERANCE_ENV, raising=False)


@pytest.fixture
def settings(tmp_path):
    return Settings(data_dir=tmp_path / "data")


@pytest.fixture
def evaluator(settings):
    return Evaluator(settings=settings)


@pytest.fixture
def handler(settings):
    return ServerHandler(settings=settings)


@pytest.fixture
def config_file(tmp_path):
    """Write a config.yaml with a lenient default and a custom mask."""
    path = tmp_path / "config.yaml"
    data = {
        "default_tolerance": "lenient",
        "matching": {"mask": "[...]"},
    }
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
