"""
Plant Presets Loader

Loads named plant shapes (tree, shrub, flower, ...) from a YAML file.
Presets are plain Plant instances; the file is read, never written.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from plantcreator.domain.models import InvalidPlantError, Plant
from plantcreator.infrastructure.config import get_config
from plantcreator.infrastructure.schemas import PlantSpec

logger = logging.getLogger(__name__)


class PresetError(ValueError):
    """Raised when a presets file or one of its entries is malformed."""


class PlantPresetCatalog:
    """Named plant specifications loaded from a presets file."""

    def __init__(self, specs: Optional[Dict[str, PlantSpec]] = None, version: str = ""):
        self._specs: Dict[str, PlantSpec] = dict(specs or {})
        self.version = version
        self._plants: Optional[Dict[str, Plant]] = None

    @classmethod
    def from_dict(cls, data: dict, source: str = "<dict>") -> "PlantPresetCatalog":
        if not isinstance(data, dict):
            raise PresetError(f"Presets document must be a mapping: {source}")

        plants = data.get("plants")
        if not isinstance(plants, dict):
            raise PresetError(f"Presets document has no 'plants' mapping: {source}")

        specs = {}
        for name, entry in plants.items():
            try:
                specs[str(name)] = PlantSpec.model_validate(entry or {})
            except ValidationError as e:
                logger.warning("Rejected preset '%s' in %s", name, source)
                raise PresetError(f"Invalid preset '{name}' in {source}: {e}") from e

        return cls(specs=specs, version=str(data.get("version", "")))

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "PlantPresetCatalog":
        """Load presets from a YAML file."""
        with open(file_path, 'r') as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise PresetError(f"Presets file is not valid YAML: {file_path}") from e

        catalog = cls.from_dict(data, source=str(file_path))
        logger.debug("Loaded %d plant presets from %s", len(catalog), file_path)
        return catalog

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def names(self) -> List[str]:
        """Return preset names, sorted."""
        return sorted(self._specs)

    def get_spec(self, name: str) -> PlantSpec:
        """
        Get the raw specification of a preset.

        Raises:
            KeyError: If no preset has this name
        """
        if name not in self._specs:
            raise KeyError(f"Unknown plant preset '{name}'. Available: {', '.join(self.names())}")
        return self._specs[name]

    def build(self, name: str) -> Plant:
        """
        Build the plant for a preset.

        Raises:
            KeyError: If no preset has this name
            PresetError: If the preset violates a plant invariant
        """
        spec = self.get_spec(name)
        try:
            return spec.to_plant()
        except InvalidPlantError as e:
            logger.warning("Preset '%s' is not a valid plant: %s", name, e)
            raise PresetError(f"Invalid preset '{name}': {e}") from e

    def build_all(self) -> Dict[str, Plant]:
        """
        Build every preset, keyed by name. Built plants are cached.

        Raises:
            PresetError: If any preset violates a plant invariant
        """
        if self._plants is None:
            self._plants = {name: self.build(name) for name in self.names()}
        return dict(self._plants)

    def find(self, plant: Plant) -> Optional[str]:
        """
        Return the name of the first preset, in sorted order, equal to the plant.

        Raises:
            PresetError: If any preset violates a plant invariant
        """
        for name, preset in self.build_all().items():
            if preset == plant:
                return name
        return None


class PlantPresetLoader:
    """
    Loader for plant presets.

    Reads the presets file once and caches the catalog.
    """

    def __init__(self, presets_path: Union[str, Path, None] = None):
        self.presets_path = Path(presets_path) if presets_path else get_config().presets_path
        self._cache: Optional[PlantPresetCatalog] = None

    def load(self) -> PlantPresetCatalog:
        """
        Load the presets catalog.

        Raises:
            FileNotFoundError: If the presets file doesn't exist
            PresetError: If the presets file is malformed
        """
        if self._cache is not None:
            return self._cache

        if not self.presets_path.exists():
            raise FileNotFoundError(f"Plant presets file not found: {self.presets_path}")

        self._cache = PlantPresetCatalog.from_file(self.presets_path)
        return self._cache

    def clear_cache(self) -> None:
        """Clear the cached catalog."""
        self._cache = None


# Singleton loader instance
_loader: Optional[PlantPresetLoader] = None


def get_plant_preset(name: str) -> Plant:
    """Build a preset from the configured presets file."""
    global _loader
    if _loader is None:
        _loader = PlantPresetLoader()
    return _loader.load().build(name)


def reset_preset_loader() -> None:
    """Forget the singleton loader so the next lookup re-reads configuration."""
    global _loader
    _loader = None
