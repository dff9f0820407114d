"""Command-line interface for the Restaurant Week selector."""

import argparse
import logging
import sys

from pydantic import ValidationError

from restaurant_selector import __version__
from restaurant_selector.config import get_config, setup_logging
from restaurant_selector.models import MENU_TYPE_LABELS, FilterConfig, MealOption
from restaurant_selector.selection import select
from restaurant_selector.services import DataSourceSelector

logger = logging.getLogger(__name__)

EXAMPLES = """
Examples:
  $ restaurant-selector --meal dinner --menu-types 3,4 --count 3
  $ restaurant-selector -m lunch -t 1,2 -c 5
  $ restaurant-selector --force-api -m both -c 10
"""


class InvalidOptionError(ValueError):
    """Raised when a command-line option fails validation."""


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    menu_help = ", ".join(f"{key}: {label}" for key, label in MENU_TYPE_LABELS.items())
    parser = argparse.ArgumentParser(
        prog="restaurant-selector",
        description="Random restaurant picker for Restaurant Week",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-m",
        "--meal",
        default=MealOption.BOTH.value,
        help="Meal: lunch, dinner or both (default: both)",
    )
    parser.add_argument(
        "-t",
        "--menu-types",
        default="1,2,3,4",
        help=f"Menu types (1-4, comma separated) {menu_help}",
    )
    parser.add_argument(
        "-c",
        "--count",
        default="5",
        help="Number of restaurants to suggest (default: 5)",
    )
    parser.add_argument(
        "-f",
        "--force-api",
        action="store_true",
        help="Query the API and ignore the cache file",
    )
    return parser


def parse_menu_types(raw: str) -> tuple[int, ...]:
    """Parse a comma separated list of menu type ids.

    Values that are not integers in the valid range are dropped.
    """
    menu_types = []
    for token in raw.split(","):
        try:
            value = int(token.strip())
        except ValueError:
            continue
        if value in MENU_TYPE_LABELS and value not in menu_types:
            menu_types.append(value)
    return tuple(menu_types)


def build_filter_config(args: argparse.Namespace) -> FilterConfig:
    """Validate parsed arguments into a FilterConfig.

    Raises:
        InvalidOptionError: If the meal, menu types or count are invalid
    """
    try:
        meal = MealOption(args.meal.strip().lower())
    except ValueError:
        raise InvalidOptionError("Meal must be 'lunch', 'dinner' or 'both'") from None

    menu_types = parse_menu_types(args.menu_types)
    if not menu_types:
        raise InvalidOptionError(
            "At least one valid menu type (1-4) must be specified"
        )

    try:
        count = int(str(args.count).strip())
    except ValueError:
        count = 0
    if count < 1:
        raise InvalidOptionError("The number of restaurants must be a positive number")

    return FilterConfig(
        meal=meal,
        menu_types=menu_types,
        count=count,
        force_refresh=args.force_api,
    )


class SelectorCLI:
    """Runs one selection and prints the suggestions."""

    def __init__(
        self, filters: FilterConfig, source: DataSourceSelector | None = None
    ) -> None:
        """Initialize the CLI.

        Args:
            filters: Validated filter selection for this run
            source: Data source selector; defaults to the configured cache and API
        """
        self.config = get_config()
        self.filters = filters
        self.source = source or DataSourceSelector()

    def run(self) -> None:
        """Load registrations, pick suggestions and print them."""
        loaded = self.source.load(force_refresh=self.filters.force_refresh)
        suggestions = select(
            loaded.registrations,
            self.filters,
            base_url=self.config.restaurant_base_url,
        )

        print("\nRestaurant Week suggestions:")
        print(f"Meal: {self.filters.meal.value}")
        print(f"Menu types: {', '.join(str(t) for t in self.filters.menu_types)}")
        print(f"Data source: {loaded.source.value}")
        print("\nSuggested restaurants:")

        if not suggestions:
            print("No restaurants found matching the given criteria.")
            return

        for index, suggestion in enumerate(suggestions, start=1):
            print(f"{index}. {suggestion}")


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    try:
        # Validate configuration by attempting to load it
        config = get_config()
    except ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(config)

    try:
        filters = build_filter_config(args)
    except InvalidOptionError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.debug(f"Filters: {filters}")
    SelectorCLI(filters).run()


if __name__ == "__main__":
    main()
