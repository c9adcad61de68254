# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Iterator

import pytest

from ganttfmt import configuration
from ganttfmt.initialize import initialize
from ganttfmt.repository.configuration import CONFIGURATION_REPO

EXAMPLE_DIAGRAM = """\
gantt
    title A Gantt Diagram
    dateFormat YYYY-MM-DD
    section Section
        A task          :done, a1, 2014-01-01, 30d
        Another task    :active, a2, after a1, 20d
        A milestone : milestone, after a2

    section Another
        Task in Another :crit,taskid1,2014-01-12, 12d
        another task    :taskid2,after taskid1, 24d
"""


@pytest.fixture(autouse=True)
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point the configuration at a temporary directory for every test."""
    config_path = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path / "config.yaml")
    CONFIGURATION_REPO.reset()
    initialize()
    yield config_path
    CONFIGURATION_REPO.reset()


@pytest.fixture
def example_diagram() -> str:
    return EXAMPLE_DIAGRAM
