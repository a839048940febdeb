# SPDX-License-Identifier: MIT

from pathlib import Path

import pendulum
import pytest

from trifecta import configuration
from trifecta.repository.configuration import CONFIGURATION_REPO
from trifecta.repository.todo import TodoRepository
from trifecta.template.configuration import get_configuration_template


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> configuration.Configuration:
    """Point every path at tmp_path and never touch the network."""
    todos_dir = tmp_path / "data" / "todos"
    todos_dir.mkdir(parents=True)
    monkeypatch.setattr(configuration, "CONFIG_PATH", tmp_path / "config")
    monkeypatch.setattr(
        configuration, "APP_CONFIG_PATH", tmp_path / "config" / "config.yaml"
    )
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path / "data")
    monkeypatch.setattr(configuration, "DATA_TODOS_DIR", todos_dir)

    config = get_configuration_template()
    config["fetch_quotes"] = False
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", config)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    return config


@pytest.fixture
def todos_dir() -> Path:
    return configuration.DATA_TODOS_DIR


@pytest.fixture
def repository(todos_dir: Path) -> TodoRepository:
    return TodoRepository(todos_dir)


@pytest.fixture
def mid_june() -> pendulum.DateTime:
    return pendulum.datetime(2024, 6, 15, 18, 0, 0, tz="UTC")
