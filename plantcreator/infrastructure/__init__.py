"""
Infrastructure Layer

Configuration, input schemas and the presets file.
"""

from plantcreator.infrastructure.config import AppConfig, get_config, reload_config
from plantcreator.infrastructure.schemas import PlantSpec
from plantcreator.infrastructure.plant_presets import (
    PlantPresetCatalog,
    PlantPresetLoader,
    PresetError,
    get_plant_preset,
)
