"""
Pytest configuration and shared fixtures for change gear tests.
"""

import json
import pytest
from pathlib import Path

from changegears.io import SolverConfig


# ─── Raw config data ─────────────────────────────────────────────────────


SAMPLE_GEARS = (20, 30, 40, 50, 60, 80, 100)


def _config_text():
    """Return the sample config in KEY = value format."""
    return """\
# Sample lathe: 8 TPI leadscrew equivalent
GEAR = 20
GEAR = 30
GEAR = 40, 50, 60   # several at once
GEAR = 80 100
MAX_REDUCTIONS = 1
MAX_TEETH = 24
LEAD = 0.125
SHOW_TOP = 3
"""


def _config_dict():
    """Return the sample config as JSON-ready field names."""
    return {
        "available_gears": list(SAMPLE_GEARS),
        "max_reductions": 1,
        "max_gear_teeth": 24,
        "lead": 0.125,
        "show_best_count": 3,
    }


# ─── Typed configs ───────────────────────────────────────────────────────


@pytest.fixture
def sample_config():
    """Seven-gear, single-reduction config used across the end-to-end tests."""
    return SolverConfig(**_config_dict())


@pytest.fixture
def exact_match_config():
    """Config in which 20 -> 50 gives an exact 2.5 ratio on an 8 TPI leadscrew."""
    return SolverConfig(
        available_gears=(20, 30, 50),
        max_reductions=1,
        max_gear_teeth=24,
        lead=8.0,
        show_best_count=3,
    )


@pytest.fixture
def two_stage_config():
    """Config whose only exact ratio of 4 needs two reductions."""
    return SolverConfig(
        available_gears=(20, 40, 30, 60),
        max_reductions=2,
        max_gear_teeth=24,
        lead=8.0,
        show_best_count=5,
    )


# ─── Files ───────────────────────────────────────────────────────────────


@pytest.fixture
def sample_config_text():
    return _config_text()


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary KEY = value config file."""
    config_file = tmp_path / "lathe.conf"
    config_file.write_text(_config_text())
    return config_file


@pytest.fixture
def temp_json_config_file(tmp_path):
    """Create a temporary JSON config file."""
    json_file = tmp_path / "lathe.json"
    with open(json_file, 'w') as f:
        json.dump(_config_dict(), f)
    return json_file


@pytest.fixture
def examples_dir():
    """Path to examples directory."""
    return Path(__file__).parent.parent / "examples"
