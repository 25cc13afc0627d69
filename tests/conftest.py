"""Shared test fixtures for the usagetable test suite."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from usagetable.lib.log_lib import channels as _channels_mod
from usagetable.lib.log_lib import manager as _manager_mod


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
TEST_DATA_DIR = PROJECT_ROOT / "tests" / "test-data"
DECLARATIONS_DIR = TEST_DATA_DIR / "declarations"


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: runs the CLI in a subprocess (deselect with -m 'not slow')")


# ---------------------------------------------------------------------------
# Output system isolation
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_output_state():
    """Give every test a fresh output manager and the default channel set.

    The manager binds sys.stderr when it is created, so a manager left over
    from an earlier test would write past capsys.
    """
    saved_manager = _manager_mod._manager
    saved_channels = (
        _channels_mod.KNOWN_CHANNELS,
        _channels_mod.CHANNEL_DESCRIPTIONS,
        _channels_mod.OPT_IN_CHANNELS,
    )
    _manager_mod._manager = None
    yield
    _manager_mod._manager = saved_manager
    (_channels_mod.KNOWN_CHANNELS,
     _channels_mod.CHANNEL_DESCRIPTIONS,
     _channels_mod.OPT_IN_CHANNELS) = saved_channels


# ---------------------------------------------------------------------------
# Temporary directory fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.usagetable/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def tmp_project(tmp_path, tmp_config_home, monkeypatch):
    """A project directory that is also the working directory."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


# ---------------------------------------------------------------------------
# Declaration fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def cat_declaration():
    """Path to the GNU cat style declaration."""
    return DECLARATIONS_DIR / "cat.json"


@pytest.fixture
def zip_declaration():
    """Path to the Info-ZIP style declaration (two-up, unsorted)."""
    return DECLARATIONS_DIR / "zip.json"


@pytest.fixture
def write_declaration(tmp_path):
    """Write a declaration dict to a JSON file and return its path."""
    def _write(data, name="opts.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return path
    return _write


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def sample_project_config(tmp_project):
    """Write a .usagetable.json file in the tmp project."""
    config = {"layout": "two-up", "program": "projprog"}
    path = tmp_project / ".usagetable.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path, config


@pytest.fixture
def sample_global_config(tmp_config_home):
    """Write a global config file in the tmp home."""
    config_dir = tmp_config_home / ".usagetable"
    config_dir.mkdir()
    config = {"layout": "default", "program": "globalprog", "hang-indent": 4}
    path = config_dir / "config.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path, config
