"""
Configuration Module

Centralized configuration management for Plant Creator.
"""

import os
import logging
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


BUNDLED_PRESETS_PATH = Path(__file__).resolve().parent.parent / "data" / "presets.yaml"


@dataclass
class AppConfig:
    """Main application configuration."""
    debug: bool = False
    log_level: str = "INFO"
    default_preset: str = "tree"

    # Paths
    presets_path: Path = field(default_factory=lambda: BUNDLED_PRESETS_PATH)

    @classmethod
    def from_env(cls) -> "AppConfig":
        presets_path = os.getenv("PLANT_PRESETS_PATH")
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        if log_level not in logging.getLevelNamesMapping():
            log_level = "INFO"
        return cls(
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=log_level,
            default_preset=os.getenv("PLANT_DEFAULT_PRESET", "tree"),
            presets_path=Path(presets_path) if presets_path else BUNDLED_PRESETS_PATH,
        )

    @property
    def effective_log_level(self) -> str:
        """Log level to use, forced to DEBUG when debug mode is on."""
        return "DEBUG" if self.debug else self.log_level


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reload_config() -> AppConfig:
    """Reload configuration from environment."""
    global _config
    _config = AppConfig.from_env()
    return _config
