"""Interactive menu for the road network registry.

Startup loads cities.txt / roads.txt from the data directory, then the
menu handles one command per iteration until "Save and Exit".
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from .config import AppConfig, ObservabilityConfig, get_config
from .container import Container
from .domain.errors import ConfigurationError
from .services import NetworkService

logger = logging.getLogger(__name__)

EXIT_CHOICE = 9

MENU_ITEMS = (
    "Add New City(ies)",
    "Add Roads Between Cities",
    "Assign Road Budgets",
    "Edit City",
    "Search for City",
    "Display Cities",
    "Display Roads",
    "Display All Data",
    "Save and Exit",
)


def configure_logging(config: ObservabilityConfig) -> None:
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}", setting_name="RN_LOG_LEVEL"
        )
    logging.basicConfig(
        level=level,
        format=config.format,
        filename=str(config.file) if config.file else None,
    )


def format_menu(title: str) -> str:
    lines = ["", f"=== {title} ==="]
    lines += [f"{n}. {label}" for n, label in enumerate(MENU_ITEMS, start=1)]
    return "\n".join(lines)


def run_menu(service: NetworkService, title: Optional[str] = None) -> int:
    """Dispatch menu choices until the operator saves and exits.

    Returns:
        Process exit code: 0 after "Save and Exit".
    """
    title = title or get_config().display.title
    actions: Dict[int, Callable[[], None]] = {
        1: service.add_cities,
        2: service.add_road,
        3: service.assign_budget,
        4: service.edit_city,
        5: service.search_city,
        6: service.show_cities,
        7: service.show_roads,
        8: service.show_all,
    }
    console = service.console

    while True:
        console.write(format_menu(title))
        choice = service.prompter.read_int(
            f"Enter your choice (1-{EXIT_CHOICE}): ", 1, EXIT_CHOICE
        )
        if choice == EXIT_CHOICE:
            service.save()
            console.write("Data saved. Exiting program.")
            return 0
        logger.debug("Menu choice", extra={"choice": choice})
        actions[choice]()


def main(config: Optional[AppConfig] = None) -> int:
    """Entry point for the ``road-network`` command."""
    config = config or get_config()
    configure_logging(config.observability)

    container = Container.create_default(config)
    service: NetworkService = container.resolve(NetworkService)
    service.load()

    try:
        return run_menu(service, config.display.title)
    except (EOFError, KeyboardInterrupt):
        logger.warning("Input closed, exiting without saving")
        service.console.write("\nInput closed. Exiting without saving.")
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
