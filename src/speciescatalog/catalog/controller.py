"""Controller for the in-memory species catalog.

The controller exclusively owns every species record. Callers get strings and
booleans back, never the records themselves, so the only way to change the
catalog is through the operations below. Indices are 0-based; translating
user-facing numbers is the client's job.
"""

import logging

from speciescatalog.species.enums import SpeciesType
from speciescatalog.species.exceptions import SpeciesCatalogError
from speciescatalog.species.models import Fauna, Flora, Species

logger = logging.getLogger(__name__)

SPECIES_NOT_FOUND = "Species not found"

# Hard upper bound on catalog entries
MAX_CAPACITY = 80


class SpeciesController:
    """Handles create, edit, delete and query operations on the catalog."""

    def __init__(self, capacity: int = MAX_CAPACITY):
        """Initialize an empty catalog.

        Args:
            capacity: Maximum number of records, between 1 and MAX_CAPACITY

        Raises:
            ValueError: If capacity is outside the allowed range
        """
        if not 1 <= capacity <= MAX_CAPACITY:
            raise ValueError(f"Capacity must be between 1 and {MAX_CAPACITY}, got {capacity}")
        self._capacity = capacity
        self._species: list[Species] = []

    @property
    def capacity(self) -> int:
        """Maximum number of records the catalog holds."""
        return self._capacity

    @property
    def count(self) -> int:
        """Number of records currently in the catalog."""
        return len(self._species)

    @property
    def is_full(self) -> bool:
        """Whether registration would be refused for lack of room."""
        return self.count >= self._capacity

    def __len__(self) -> int:
        return self.count

    def _is_valid_index(self, index: int) -> bool:
        return 0 <= index < self.count

    def _register(self, build: type[Species], *args: object) -> bool:
        if self.is_full:
            logger.warning(
                "Catalog is full, registration refused",
                extra={"capacity": self._capacity, "species_name": args[0]},
            )
            return False

        try:
            record = build(*args)
        except SpeciesCatalogError as e:
            logger.error("Invalid species record: %s", e, extra={"species_name": args[0]})
            return False

        self._species.append(record)
        logger.debug(
            "Registered %s '%s' at position %d", record.variant.value, record.name, self.count
        )
        return True

    def register_flora(
        self,
        name: str,
        scientific_name: str,
        species_type: SpeciesType,
        has_flowers: bool,
        has_fruits: bool,
        max_height: float,
    ) -> bool:
        """Register a new flora species in the catalog.

        Args:
            name: The common name of the flora species
            scientific_name: The scientific name in binomial nomenclature
            species_type: LAND_FLORA or AQUATIC_FLORA
            has_flowers: Whether the plant produces flowers
            has_fruits: Whether the plant produces fruits
            max_height: The maximum height the plant can reach in meters

        Returns:
            True if registered, False if the catalog is full or a field is invalid
        """
        return self._register(
            Flora, name, scientific_name, species_type, has_flowers, has_fruits, max_height
        )

    def register_fauna(
        self,
        name: str,
        scientific_name: str,
        species_type: SpeciesType,
        is_migratory: bool,
        max_weight: float,
    ) -> bool:
        """Register a new fauna species in the catalog.

        Args:
            name: The common name of the fauna species
            scientific_name: The scientific name in binomial nomenclature
            species_type: BIRD, MAMMAL or AQUATIC_FAUNA
            is_migratory: Whether the animal is migratory
            max_weight: The maximum weight the animal can reach in kilograms

        Returns:
            True if registered, False if the catalog is full or a field is invalid
        """
        return self._register(Fauna, name, scientific_name, species_type, is_migratory, max_weight)

    def edit_species(self, index: int, name: str, scientific_name: str) -> bool:
        """Overwrite the names of an existing species.

        Values are written as given; keeping a current value is up to the caller.

        Returns:
            True if the record was updated, False if the index is out of range
        """
        if not self._is_valid_index(index):
            logger.debug("Edit refused, index %d out of range", index)
            return False

        record = self._species[index]
        record.name = name
        record.scientific_name = scientific_name
        return True

    def delete_species(self, index: int) -> bool:
        """Remove a species, shifting every later entry one position left.

        Returns:
            True if the record was removed, False if the index is out of range
        """
        if not self._is_valid_index(index):
            logger.debug("Delete refused, index %d out of range", index)
            return False

        removed = self._species.pop(index)
        logger.debug("Deleted '%s' from position %d", removed.name, index + 1)
        return True

    def get_species_info(self, index: int) -> str:
        """Return the full description of a species, or SPECIES_NOT_FOUND."""
        if not self._is_valid_index(index):
            return SPECIES_NOT_FOUND
        return self._species[index].info()

    def show_species_list(self) -> str:
        """Return a 1-based numbered listing of names, or "" when the catalog is empty."""
        return "\n".join(
            f"{position}. {record.name}" for position, record in enumerate(self._species, 1)
        )

    def get_species_name(self, index: int) -> str | None:
        """Return the common name at index, or None if out of range."""
        if not self._is_valid_index(index):
            return None
        return self._species[index].name

    def get_species_scientific_name(self, index: int) -> str | None:
        """Return the scientific name at index, or None if out of range."""
        if not self._is_valid_index(index):
            return None
        return self._species[index].scientific_name
