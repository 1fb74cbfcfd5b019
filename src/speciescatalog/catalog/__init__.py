"""Catalog package: the controller that owns every species record."""

from speciescatalog.catalog.controller import MAX_CAPACITY, SPECIES_NOT_FOUND, SpeciesController

__all__ = [
    "MAX_CAPACITY",
    "SPECIES_NOT_FOUND",
    "SpeciesController",
]
