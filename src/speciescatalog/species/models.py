"""Species records held by the catalog.

A record is either ``Flora`` or ``Fauna``. Both share the base fields of
``Species`` (common name, scientific name and type) and add their own
measurements. The type is validated against the variant when the record is
built and cannot be reassigned afterwards. Flags must be real booleans and
measurements real numbers; nothing is guessed from strings.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from speciescatalog.species.display import format_species_info
from speciescatalog.species.enums import FAUNA_TYPES, FLORA_TYPES, SpeciesType, SpeciesVariant
from speciescatalog.species.exceptions import InvalidFieldError, InvalidTypeError


@dataclass
class Species:
    """Base fields shared by every species record."""

    VARIANT: ClassVar[SpeciesVariant]
    ALLOWED_TYPES: ClassVar[tuple[SpeciesType, ...]] = ()

    name: str
    scientific_name: str
    type: SpeciesType

    def __post_init__(self) -> None:
        """Validate the type against the variant's allowed set."""
        if type(self) is Species:
            raise TypeError("Species is abstract; build a Flora or Fauna record")
        object.__setattr__(self, "type", self._coerce_type(self.type))

    @classmethod
    def _coerce_type(cls, value: Any) -> SpeciesType:
        try:
            species_type = SpeciesType(value)
        except ValueError:
            raise InvalidTypeError(cls.__name__, value, cls.ALLOWED_TYPES) from None
        if species_type not in cls.ALLOWED_TYPES:
            raise InvalidTypeError(cls.__name__, species_type, cls.ALLOWED_TYPES)
        return species_type

    def _require_flag(self, field_name: str) -> None:
        value = getattr(self, field_name)
        if not isinstance(value, bool):
            raise InvalidFieldError(type(self).__name__, field_name, value, "true or false")

    def _require_measurement(self, field_name: str) -> None:
        value = getattr(self, field_name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidFieldError(type(self).__name__, field_name, value, "a number")
        object.__setattr__(self, field_name, float(value))

    def __setattr__(self, name: str, value: Any) -> None:
        # type is fixed once validated
        if name == "type" and "type" in self.__dict__:
            raise AttributeError(f"{type(self).__name__}.type cannot be changed")
        super().__setattr__(name, value)

    @property
    def variant(self) -> SpeciesVariant:
        """Return the record's variant tag."""
        return self.VARIANT

    def info(self) -> str:
        """Return the formatted multi-line description of this record."""
        return format_species_info(self)


@dataclass
class Flora(Species):
    """Plant species."""

    VARIANT: ClassVar[SpeciesVariant] = SpeciesVariant.FLORA
    ALLOWED_TYPES: ClassVar[tuple[SpeciesType, ...]] = FLORA_TYPES

    has_flowers: bool
    has_fruits: bool
    max_height: float  # meters

    def __post_init__(self) -> None:
        super().__post_init__()
        self._require_flag("has_flowers")
        self._require_flag("has_fruits")
        self._require_measurement("max_height")


@dataclass
class Fauna(Species):
    """Animal species."""

    VARIANT: ClassVar[SpeciesVariant] = SpeciesVariant.FAUNA
    ALLOWED_TYPES: ClassVar[tuple[SpeciesType, ...]] = FAUNA_TYPES

    is_migratory: bool
    max_weight: float  # kilograms

    def __post_init__(self) -> None:
        super().__post_init__()
        self._require_flag("is_migratory")
        self._require_measurement("max_weight")
