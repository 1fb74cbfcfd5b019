"""Interactive menu client for the species catalog.

This script provides the text menu used to register, edit, delete and inspect
species. The catalog lives in memory only and is discarded on exit.

Examples:
  # Start the interactive menu
  species-catalog menu

  # Use a specific configuration file
  species-catalog --config ./speciescatalog.yaml menu

  # List the species types and their menu numbers
  species-catalog types
"""

import sys
from pathlib import Path

import click

from speciescatalog.catalog.controller import SpeciesController
from speciescatalog.config import CatalogConfig, ConfigManager
from speciescatalog.species.enums import SpeciesType, SpeciesVariant
from speciescatalog.utils.structlog_configurator import configure_structlog, get_logger

# Menu numbers offered when registering a species
TYPE_CHOICES: dict[int, SpeciesType] = {
    1: SpeciesType.LAND_FLORA,
    2: SpeciesType.AQUATIC_FLORA,
    3: SpeciesType.BIRD,
    4: SpeciesType.MAMMAL,
    5: SpeciesType.AQUATIC_FAUNA,
}

MAIN_MENU = (
    "\nPlease select an option:\n"
    "1. Register a Species\n"
    "2. Edit a Species\n"
    "3. Delete a Species\n"
    "4. Show Species Information\n"
    "0. Exit"
)


def format_type_choices() -> str:
    """Return the numbered species types grouped by variant."""
    lines = []
    headings = ((SpeciesVariant.FLORA, "Flora Types:"), (SpeciesVariant.FAUNA, "Fauna Types:"))
    for variant, heading in headings:
        if lines:
            lines.append("")
        lines.append(heading)
        lines.extend(
            f"{number}. {species_type.label}"
            for number, species_type in TYPE_CHOICES.items()
            if species_type.variant is variant
        )
    return "\n".join(lines)


class SpeciesMenu:
    """Reads user input, calls the controller and renders its answers.

    User-facing numbers are 1-based; the controller is 0-based. Blank input
    while editing keeps the current value, resolved here before the call.
    """

    def __init__(self, controller: SpeciesController, title: str = "Species Catalog"):
        self.controller = controller
        self.title = title

    def run(self) -> None:
        """Show the main menu until the user exits."""
        click.echo(f"Welcome to the {self.title} Management System")

        actions = {
            1: self.register_species,
            2: self.edit_species,
            3: self.delete_species,
            4: self.show_species,
        }

        while True:
            click.echo(MAIN_MENU)
            option = click.prompt("Option", type=int)

            if option == 0:
                click.echo(f"Thank you for using the {self.title} Management System")
                return

            action = actions.get(option)
            if action is None:
                click.echo("Invalid option. Please try again.")
                continue
            action()

    def register_species(self) -> None:
        """Collect the fields of a new species and register it."""
        click.echo("\nSelect species type:")
        click.echo(format_type_choices())
        choice = click.prompt("Type", type=int)

        species_type = TYPE_CHOICES.get(choice)
        if species_type is None:
            click.echo("Invalid species type selected.")
            return

        # names are free text; an empty answer is stored as given
        name = click.prompt("Enter species name", default="", show_default=False)
        scientific_name = click.prompt("Enter scientific name", default="", show_default=False)

        if species_type.variant is SpeciesVariant.FLORA:
            has_flowers = click.prompt("Does it have flowers? (true/false)", type=click.BOOL)
            has_fruits = click.prompt("Does it have fruits? (true/false)", type=click.BOOL)
            max_height = click.prompt("Enter maximum height (in meters)", type=float)
            success = self.controller.register_flora(
                name, scientific_name, species_type, has_flowers, has_fruits, max_height
            )
        else:
            is_migratory = click.prompt("Is it migratory? (true/false)", type=click.BOOL)
            max_weight = click.prompt("Enter maximum weight (in kg)", type=float)
            success = self.controller.register_fauna(
                name, scientific_name, species_type, is_migratory, max_weight
            )

        if success:
            click.echo(click.style("Species registered successfully!", fg="green"))
        else:
            click.echo(
                click.style(
                    "Error: Could not register species. The catalog might be full.", fg="red"
                )
            )

    def edit_species(self) -> None:
        """Rename a species; blank answers keep the current values."""
        if not self._show_species_list():
            return

        index = self._prompt_index("edit")
        current_name = self.controller.get_species_name(index)
        current_scientific_name = self.controller.get_species_scientific_name(index)

        if current_name is None or current_scientific_name is None:
            click.echo(click.style("Error: Invalid species index selected.", fg="red"))
            return

        click.echo(f"Current name: {current_name}")
        new_name = click.prompt(
            "Enter new name (or press Enter to keep current)", default="", show_default=False
        )
        click.echo(f"Current scientific name: {current_scientific_name}")
        new_scientific_name = click.prompt(
            "Enter new scientific name (or press Enter to keep current)",
            default="",
            show_default=False,
        )

        final_name = new_name or current_name
        final_scientific_name = new_scientific_name or current_scientific_name

        if self.controller.edit_species(index, final_name, final_scientific_name):
            click.echo(click.style("Species updated successfully!", fg="green"))
        else:
            click.echo(
                click.style("Error: Could not update species. Please try again.", fg="red")
            )

    def delete_species(self) -> None:
        """Remove the species the user picks."""
        if not self._show_species_list():
            return

        if self.controller.delete_species(self._prompt_index("delete")):
            click.echo(click.style("Species deleted successfully!", fg="green"))
        else:
            click.echo(click.style("Error: Could not delete species. Invalid index.", fg="red"))

    def show_species(self) -> None:
        """Print the full description of the species the user picks."""
        if not self._show_species_list():
            return

        info = self.controller.get_species_info(self._prompt_index("view"))
        click.echo("\nSpecies Information:")
        click.echo(info)

    def _show_species_list(self) -> bool:
        """Print the current list; return False when there is nothing to act on."""
        species_list = self.controller.show_species_list()
        if not species_list:
            click.echo("No species registered yet.")
            return False

        click.echo("Current species list:")
        click.echo(species_list)
        return True

    def _prompt_index(self, action: str) -> int:
        """Ask for a 1-based number and return the matching 0-based index."""
        number = click.prompt(f"\nEnter the number of the species to {action}", type=int)
        return number - 1


def _load_config(config_path: Path | None) -> CatalogConfig:
    """Load configuration or exit with a readable error."""
    try:
        return ConfigManager(config_path=config_path).load()
    except ValueError as e:
        click.echo(click.style(f"✗ {e}", fg="red"), err=True)
        sys.exit(1)


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to the YAML configuration file (created with defaults if missing)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """Species Catalog: manage flora and fauna records in memory."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@cli.command()
@click.pass_context
def menu(ctx: click.Context) -> None:
    """Start the interactive species menu."""
    config = _load_config(ctx.obj.get("config_path"))
    configure_structlog(config)
    logger = get_logger(__name__)

    controller = SpeciesController(capacity=config.capacity)
    logger.info("Species catalog started", capacity=controller.capacity)

    SpeciesMenu(controller, title=config.catalog_name).run()

    logger.info("Species catalog closed", species_count=controller.count)


@cli.command()
def types() -> None:
    """List the species types and their menu numbers."""
    click.echo(format_type_choices())


def main() -> None:
    """Entry point for the species catalog CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
