"""
Shared test fixtures for the Plant Creator test suite.

Provides:
- Isolation of the configuration and presets-loader singletons
- A small presets file written to a temporary directory
"""

import logging

import pytest

from plantcreator.infrastructure import config, plant_presets

# ---------------------------------------------------------------------------
# Logging — keep test output clean
# ---------------------------------------------------------------------------
logging.getLogger("plantcreator").setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Each test starts from default configuration and a fresh presets loader."""
    for var in ("DEBUG", "LOG_LEVEL", "PLANT_PRESETS_PATH", "PLANT_DEFAULT_PRESET"):
        monkeypatch.delenv(var, raising=False)
    config.reload_config()
    plant_presets.reset_preset_loader()
    yield
    config.reload_config()
    plant_presets.reset_preset_loader()


@pytest.fixture()
def presets_file(tmp_path):
    """A presets file with two valid entries."""
    path = tmp_path / "presets.yaml"
    path.write_text(
        "version: '2'\n"
        "plants:\n"
        "  oak:\n"
        "    description: '  Big tree  '\n"
        "    minimum_height: 15\n"
        "    maximum_height: 40\n"
        "    has_leaves: true\n"
        "    has_stem: true\n"
        "    has_bush: true\n"
        "  daisy:\n"
        "    minimum_height: 1\n"
        "    maximum_height: 1\n"
        "    has_leaves: yes\n"
        "    has_petals: yes\n"
        "    has_stem: yes\n"
    )
    return path
