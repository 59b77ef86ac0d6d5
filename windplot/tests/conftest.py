"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from windplot.config.schema import WindplotConfig

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def nbh_v43_text() -> str:
    """Hourly bulletin with the 'NBM V4.3 NBH' header and packed CIG/VIS rows."""
    return (FIXTURE_DIR / "nbh_v43.txt").read_text()


@pytest.fixture
def nbh_legacy_text() -> str:
    """Hourly bulletin with the older 'NBH GFS MOS' header and spaced rows."""
    return (FIXTURE_DIR / "nbh_legacy.txt").read_text()


@pytest.fixture
def nbs_v43_text() -> str:
    """Short-range bulletin with an FHR axis and a P06 row."""
    return (FIXTURE_DIR / "nbs_v43.txt").read_text()


@pytest.fixture
def default_config() -> WindplotConfig:
    return WindplotConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "nomads": {"timeout": 10.0, "max_retries": 1},
        "forecast": {"hours": 12},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
