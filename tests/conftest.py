import io

import pytest
from rich.console import Console

from env_scream import report
from env_scream.config import reset_config


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_config()
    yield
    reset_config()


@pytest.fixture
def recording_console(monkeypatch):
    """Swap the report console for one whose output can be read back as text."""
    console = Console(file=io.StringIO(), record=True, width=200, soft_wrap=True)
    monkeypatch.setattr(report, "console", console)
    return console


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run inside an empty directory so no stray .env is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
