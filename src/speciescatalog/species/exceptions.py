"""Exceptions raised by the species domain."""

from collections.abc import Iterable


class SpeciesCatalogError(Exception):
    """Base class for species catalog errors."""


class InvalidTypeError(SpeciesCatalogError, ValueError):
    """Raised when a species type does not belong to the record's variant."""

    def __init__(self, variant_name: str, species_type: object, allowed: Iterable[object]):
        self.variant_name = variant_name
        self.species_type = species_type
        self.allowed = [getattr(item, "name", str(item)) for item in allowed]
        shown = getattr(species_type, "name", repr(species_type))
        super().__init__(
            f"Invalid type for {variant_name}: {shown}. Must be one of: {', '.join(self.allowed)}"
        )


class InvalidFieldError(SpeciesCatalogError, TypeError):
    """Raised when a flag or measurement has the wrong kind of value."""

    def __init__(self, variant_name: str, field_name: str, value: object, expected: str):
        self.variant_name = variant_name
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"Invalid {field_name} for {variant_name}: {value!r}. Must be {expected}"
        )
