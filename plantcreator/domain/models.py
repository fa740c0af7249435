"""
Domain Models

Pure business entities with no framework dependencies.
All validation and business rules encapsulated here.
"""

from dataclasses import dataclass
from functools import total_ordering


# =============================================================================
# ERRORS
# =============================================================================

class InvalidPlantError(ValueError):
    """Raised when plant attributes violate a construction invariant."""


# =============================================================================
# DEFAULTS - the shape of a tree
# =============================================================================

DEFAULT_MINIMUM_HEIGHT = 10
DEFAULT_MAXIMUM_HEIGHT = 30
DEFAULT_HAS_LEAVES = False
DEFAULT_HAS_PETALS = False
DEFAULT_HAS_STEM = True
DEFAULT_HAS_BUSH = True


# =============================================================================
# VALUE OBJECTS
# =============================================================================

@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Plant:
    """
    A plant described by its height bounds and anatomy.

    Base type for plant kinds: subclass it to add behaviour. Instances are
    immutable and are validated once, on construction. Heights are in meters.

    Equality compares all six attributes field-for-field, including
    has_stem against has_stem. Instances of different subclasses are equal
    when their attributes match.

    NOTE: minimum_height is not required to be <= maximum_height.
    """
    minimum_height: int = DEFAULT_MINIMUM_HEIGHT
    maximum_height: int = DEFAULT_MAXIMUM_HEIGHT
    has_leaves: bool = DEFAULT_HAS_LEAVES
    has_petals: bool = DEFAULT_HAS_PETALS
    has_stem: bool = DEFAULT_HAS_STEM
    has_bush: bool = DEFAULT_HAS_BUSH

    def __post_init__(self):
        for height in (self.minimum_height, self.maximum_height):
            if isinstance(height, bool) or not isinstance(height, int):
                raise InvalidPlantError(f"Height must be a whole number of meters, got {height!r}")
        if self.minimum_height <= 0:
            raise InvalidPlantError("Height cannot be below zero")
        if self.maximum_height <= 0:
            raise InvalidPlantError("Height cannot be below zero")
        if (self.has_leaves and not self.has_stem) or (self.has_petals and not self.has_stem):
            raise InvalidPlantError("Cannot have leaves or petals without a stem")
        if not (self.has_leaves or self.has_petals or self.has_stem or self.has_bush):
            raise InvalidPlantError("This is not a plant")

    @classmethod
    def create(
        cls,
        minimum_height: int,
        maximum_height: int,
        has_leaves: bool,
        has_petals: bool,
        has_stem: bool,
        has_bush: bool,
    ) -> "Plant":
        """
        Create a validated plant.

        Raises:
            InvalidPlantError: If any construction invariant is violated
        """
        return cls(
            minimum_height=minimum_height,
            maximum_height=maximum_height,
            has_leaves=has_leaves,
            has_petals=has_petals,
            has_stem=has_stem,
            has_bush=has_bush,
        )

    @classmethod
    def default(cls) -> "Plant":
        """Create a plant shaped like a tree: 10-30m, stem and bush, no leaves or petals."""
        return cls.create(
            DEFAULT_MINIMUM_HEIGHT,
            DEFAULT_MAXIMUM_HEIGHT,
            DEFAULT_HAS_LEAVES,
            DEFAULT_HAS_PETALS,
            DEFAULT_HAS_STEM,
            DEFAULT_HAS_BUSH,
        )

    def _sort_key(self) -> tuple:
        return (
            self.minimum_height,
            self.maximum_height,
            self.has_leaves,
            self.has_petals,
            self.has_stem,
            self.has_bush,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Plant):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __hash__(self) -> int:
        return hash((
            self.minimum_height,
            self.maximum_height,
            self.has_leaves,
            self.has_bush,
            self.has_petals,
            self.has_stem,
        ))

    def __lt__(self, other: object) -> bool:
        # Heights first, then anatomy; subclasses may define their own order.
        if not isinstance(other, Plant):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return (
            "This is a plant with\n"
            f"minimum height: {self.minimum_height},\n"
            f"maximum height: {self.maximum_height},\n"
            f"has leaves: {self.has_leaves},\n"
            f"has petals: {self.has_petals},\n"
            f"has stem: {self.has_stem},\n"
            f"has bush: {self.has_bush}"
        )
