"""Enums for species classification."""

from enum import Enum


class SpeciesVariant(str, Enum):
    """Concrete shapes a species record can take."""

    FLORA = "flora"
    FAUNA = "fauna"


class SpeciesType(str, Enum):
    """Subcategories of species found in the catalog."""

    LAND_FLORA = "land_flora"
    AQUATIC_FLORA = "aquatic_flora"
    BIRD = "bird"
    MAMMAL = "mammal"
    AQUATIC_FAUNA = "aquatic_fauna"

    @classmethod
    def _missing_(cls, value: object) -> "SpeciesType | None":
        # Accept member names too, e.g. "LAND_FLORA" or "Land Flora"
        if isinstance(value, str):
            key = value.strip().upper().replace(" ", "_").replace("-", "_")
            return cls.__members__.get(key)
        return None

    @property
    def variant(self) -> SpeciesVariant:
        """Return the variant this type belongs to."""
        if self in FLORA_TYPES:
            return SpeciesVariant.FLORA
        return SpeciesVariant.FAUNA

    @property
    def label(self) -> str:
        """Return a human-readable label, e.g. "Land Flora"."""
        return self.value.replace("_", " ").title()


FLORA_TYPES = (SpeciesType.LAND_FLORA, SpeciesType.AQUATIC_FLORA)
FAUNA_TYPES = (SpeciesType.BIRD, SpeciesType.MAMMAL, SpeciesType.AQUATIC_FAUNA)
