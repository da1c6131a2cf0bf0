"""Network command service - one handler per menu action.

Each handler prompts through the Prompter, resolves city tokens through
the network, mutates or queries it, and prints a result line. Domain
errors are turned into one-line messages here; every check happens before
anything is changed, so an aborted command leaves the network untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..config import NetworkConfig, get_config
from ..domain.errors import (
    AlreadyConnectedError,
    CapacityExceededError,
    CityNotFoundError,
    NotConnectedError,
    PersistenceError,
    SelfLoopError,
)
from ..io.prompts import Prompter
from ..network.model import RoadNetwork
from ..ports.console import ConsolePort
from ..ports.storage import NetworkRepositoryPort
from ..viz.tables import (
    format_budget_matrix,
    format_city_details,
    format_city_table,
    format_connection_matrix,
    format_road_table,
)


@dataclass
class NetworkService:
    """Command handlers for the interactive menu.

    Attributes:
        network: The network being edited
        repository: Where the network is loaded from and saved to
        console: Operator terminal
        config: Capacity limits and currency label
    """

    network: RoadNetwork
    repository: NetworkRepositoryPort
    console: ConsolePort
    config: NetworkConfig = field(default_factory=lambda: get_config().network)

    prompter: Prompter = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.prompter = Prompter(self.console)
        self._logger = logging.getLogger(__name__)

    # ---- Persistence ------------------------------------------------------
    def load(self) -> None:
        """Load persisted state; a failure is reported and the network kept."""
        try:
            self.repository.load(self.network)
        except PersistenceError as e:
            self._logger.error("Load failed", extra={"error": str(e)})
            self.console.write(f"Error loading data: {e.message}.")

    def save(self) -> bool:
        """Write both tables, reporting each one.

        Returns:
            True if both files were written.
        """
        ok = True
        for label, writer in (
            ("Cities", self.repository.save_cities),
            ("Roads", self.repository.save_roads),
        ):
            try:
                path = writer(self.network)
            except PersistenceError as e:
                self.console.write(f"Error saving {label.lower()} to file.")
                self._logger.error("Save failed", extra={"error": str(e)})
                ok = False
            else:
                self.console.write(f"{label} saved to {path.name}")
        return ok

    # ---- Menu actions -----------------------------------------------------
    def add_cities(self) -> None:
        cities = self.network.cities
        self.console.write("\n=== Add New Cities ===")
        if len(cities):
            self.console.write("Current cities:")
            self.show_cities()

        remaining = cities.remaining_capacity
        if remaining == 0:
            self.console.write(f"Error: City capacity ({cities.capacity}) reached.")
            return

        upper = min(self.config.max_batch, remaining)
        count = self.prompter.read_int(
            f"How many new cities to add? (1-{upper}): ", 1, upper
        )
        for _ in range(count):
            name = self.prompter.read_city_name(
                f"Enter name for city #{cities.next_index}: ", cities
            )
            try:
                city = self.network.add_city(name)
            except CapacityExceededError as e:
                self.console.write(f"Error: {e.message}.")
                return
            self.console.write(f"City '{city.name}' added with index {city.index}.")

    def add_road(self) -> None:
        self.console.write("\n=== Add Road Between Cities ===")
        if len(self.network.cities) < 2:
            self.console.write("Need at least 2 cities to add a road.")
            return

        self.show_cities()
        first = self.prompter.read_text("Enter first city name or index: ")
        second = self.prompter.read_text("Enter second city name or index: ")

        try:
            road = self.network.connect(first, second)
        except CityNotFoundError:
            self.console.write("Error: One or both cities not found.")
            return
        except SelfLoopError:
            self.console.write("Error: Cannot create road between the same city.")
            return
        except AlreadyConnectedError:
            self.console.write("Road already exists between these cities.")
            return
        self.console.write(f"Road added between {road.city1} and {road.city2}.")

    def assign_budget(self) -> None:
        self.console.write("\n=== Assign Road Budget ===")
        if not len(self.network.roads):
            self.console.write("No roads exist to assign budgets.")
            return

        self.show_roads()
        first = self.prompter.read_text("Enter first connected city: ")
        second = self.prompter.read_text("Enter second connected city: ")

        try:
            self.network.require_road(first, second)
        except CityNotFoundError:
            self.console.write("Error: One or both cities not found.")
            return
        except NotConnectedError:
            self.console.write("Error: No road exists between these cities.")
            return

        currency = self.config.currency_label
        amount = self.prompter.read_float(f"Enter budget amount ({currency}): ", 0)
        road = self.network.set_budget(first, second, amount)
        self.console.write(
            f"Budget of {road.budget:.2f} {currency} assigned successfully."
        )

    def edit_city(self) -> None:
        cities = self.network.cities
        self.console.write("\n=== Edit City ===")
        if not len(cities):
            self.console.write("No cities to edit.")
            return

        self.show_cities()
        token = self.prompter.read_text("Enter city name or index to edit: ")
        index = cities.resolve(token)
        if index is None:
            self.console.write("City not found.")
            return

        new_name = self.prompter.read_city_name(
            f"Enter new name (current: {cities.name_of(index)}): ",
            cities,
            exclude_index=index,
        )
        self.network.rename_city(index, new_name)
        self.console.write("City updated successfully.")

    def search_city(self) -> None:
        cities = self.network.cities
        self.console.write("\n=== Search City ===")
        if not len(cities):
            self.console.write("No cities to search.")
            return

        token = self.prompter.read_text("Enter city name or index to search: ")
        index = cities.resolve(token)
        if index is None:
            self.console.write("City not found.")
            return

        city = cities.get(index)
        self.console.write(
            format_city_details(
                city, self.network.neighbors(index), self.config.currency_label
            )
        )

    def show_cities(self) -> None:
        self.console.write(format_city_table(self.network.cities.list_cities()))

    def show_roads(self) -> None:
        roads = self.network.roads.roads()
        self.console.write(format_road_table(roads))
        if roads:
            self.console.write(format_connection_matrix(self.network))

    def show_all(self) -> None:
        self.show_cities()
        self.show_roads()
        self.console.write(
            format_budget_matrix(self.network, self.config.currency_label)
        )
