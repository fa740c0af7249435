"""
Domain Layer

Business entities and domain logic.
Contains the Plant value object and its validation rules.
No dependencies on external frameworks.
"""

from plantcreator.domain.models import Plant, InvalidPlantError

__all__ = ["Plant", "InvalidPlantError"]
