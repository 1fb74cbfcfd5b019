"""Species domain package.

This package contains the species record model:
- SpeciesType / SpeciesVariant: classification enums
- Species, Flora, Fauna: records validated against their variant
- format_species_info: variant-dispatched description formatting
"""

from speciescatalog.species.display import format_species_info
from speciescatalog.species.enums import FAUNA_TYPES, FLORA_TYPES, SpeciesType, SpeciesVariant
from speciescatalog.species.exceptions import (
    InvalidFieldError,
    InvalidTypeError,
    SpeciesCatalogError,
)
from speciescatalog.species.models import Fauna, Flora, Species

__all__ = [
    "FAUNA_TYPES",
    "FLORA_TYPES",
    "Fauna",
    "Flora",
    "InvalidFieldError",
    "InvalidTypeError",
    "Species",
    "SpeciesCatalogError",
    "SpeciesType",
    "SpeciesVariant",
    "format_species_info",
]
