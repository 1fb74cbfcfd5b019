"""Formatting of species records for display.

Dispatch happens over the record's variant tag, so adding a variant without a
formatter fails loudly instead of falling back to a partial description.
"""

from typing import TYPE_CHECKING

from speciescatalog.species.enums import SpeciesVariant

if TYPE_CHECKING:
    from speciescatalog.species.models import Fauna, Flora, Species


def format_flag(value: bool) -> str:
    """Render a boolean in lowercase ("true"/"false")."""
    return "true" if value else "false"


def format_flora_info(flora: "Flora") -> str:
    """Format a flora record; height is shown with two decimals."""
    return (
        f"Flora - Type: {flora.type.name}\n"
        f"Name: {flora.name}\n"
        f"Scientific Name: {flora.scientific_name}\n"
        f"Has Flowers: {format_flag(flora.has_flowers)}\n"
        f"Has Fruits: {format_flag(flora.has_fruits)}\n"
        f"Max Height: {flora.max_height:.2f} meters"
    )


def format_fauna_info(fauna: "Fauna") -> str:
    """Format a fauna record."""
    return (
        f"Fauna - Name: {fauna.name}\n"
        f"Scientific Name: {fauna.scientific_name}\n"
        f"Is Migratory: {format_flag(fauna.is_migratory)}\n"
        f"Max Weight: {fauna.max_weight!r} kg"
    )


_FORMATTERS = {
    SpeciesVariant.FLORA: format_flora_info,
    SpeciesVariant.FAUNA: format_fauna_info,
}


def format_species_info(species: "Species") -> str:
    """Return the multi-line description for any species record.

    Args:
        species: A Flora or Fauna record

    Returns:
        Deterministic description including every variant field

    Raises:
        TypeError: If the record's variant has no formatter
    """
    formatter = _FORMATTERS.get(species.variant)
    if formatter is None:
        raise TypeError(f"No formatter for species variant {species.variant!r}")
    return formatter(species)  # type: ignore[arg-type]
