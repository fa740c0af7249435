"""
Pydantic Schemas for Plant Creator

Untrusted input (CLI arguments, presets file entries) is coerced and
type-checked here before it reaches the domain. Plant invariants are not
repeated: they stay in plantcreator.domain.models.
"""

from pydantic import BaseModel, Field, field_validator

from plantcreator.domain.models import Plant


class PlantSpec(BaseModel):
    """Raw description of a plant, as read from user input."""
    minimum_height: int = Field(..., description="Minimum height in meters")
    maximum_height: int = Field(..., description="Maximum height in meters")
    has_leaves: bool = Field(False, description="Whether the plant has leaves")
    has_petals: bool = Field(False, description="Whether the plant has petals")
    has_stem: bool = Field(False, description="Whether the plant has a stem")
    has_bush: bool = Field(False, description="Whether the plant has a bush at the top")
    description: str = Field("", description="Human-readable note, not part of the plant")

    @field_validator('description')
    @classmethod
    def strip_description(cls, v: str) -> str:
        return v.strip()

    def to_plant(self) -> Plant:
        """
        Build the domain plant.

        Raises:
            InvalidPlantError: If the attributes violate a plant invariant
        """
        return Plant.create(
            self.minimum_height,
            self.maximum_height,
            self.has_leaves,
            self.has_petals,
            self.has_stem,
            self.has_bush,
        )

    @classmethod
    def from_plant(cls, plant: Plant, description: str = "") -> "PlantSpec":
        return cls(
            minimum_height=plant.minimum_height,
            maximum_height=plant.maximum_height,
            has_leaves=plant.has_leaves,
            has_petals=plant.has_petals,
            has_stem=plant.has_stem,
            has_bush=plant.has_bush,
            description=description,
        )
