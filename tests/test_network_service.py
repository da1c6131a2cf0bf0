"""Menu command handlers driven through a scripted console."""

import pytest

from road_network.adapters.console import ScriptedConsole
from road_network.adapters.storage import FixedWidthTableRepository
from road_network.config import NetworkConfig, StorageConfig
from road_network.network import RoadNetwork
from road_network.services import NetworkService


@pytest.fixture
def make_service(tmp_path):
    def factory(*answers, network=None, max_cities=20):
        console = ScriptedConsole(list(answers))
        service = NetworkService(
            network=network or RoadNetwork.with_capacity(max_cities),
            repository=FixedWidthTableRepository(StorageConfig(data_dir=tmp_path)),
            console=console,
            config=NetworkConfig(max_cities=max_cities),
        )
        return service, console

    return factory


@pytest.fixture
def seeded():
    net = RoadNetwork()
    for name in ("Kigali", "Huye", "Musanze"):
        net.add_city(name)
    net.connect("1", "2")
    return net


class TestAddCities:
    def test_adds_requested_number(self, make_service):
        service, console = make_service("2", "Kigali", "huye")
        service.add_cities()
        assert "City 'Kigali' added with index 1." in console.lines
        assert "City 'huye' added with index 2." in console.lines
        assert "Enter name for city #2: " in console.lines

    def test_reprompts_on_duplicate(self, make_service, seeded):
        service, console = make_service("1", "KIGALI", "Rubavu", network=seeded)
        service.add_cities()
        assert "Error: City 'KIGALI' already exists." in console.lines
        assert seeded.cities.name_of(4) == "Rubavu"

    def test_count_limited_by_remaining_capacity(self, make_service, seeded):
        seeded.cities.capacity = 4
        service, console = make_service("3", "1", "Rubavu", network=seeded)
        service.add_cities()
        assert "How many new cities to add? (1-1): " in console.lines
        assert len(seeded.cities) == 4

    def test_full_directory(self, make_service, seeded):
        seeded.cities.capacity = 3
        service, console = make_service(network=seeded)
        service.add_cities()
        assert "Error: City capacity (3) reached." in console.lines


class TestAddRoad:
    def test_needs_two_cities(self, make_service):
        service, console = make_service()
        service.add_road()
        assert "Need at least 2 cities to add a road." in console.lines

    def test_success(self, make_service, seeded):
        service, console = make_service("huye", "3", network=seeded)
        service.add_road()
        assert "Road added between Huye and Musanze." in console.lines
        assert seeded.roads.is_connected(2, 3)

    @pytest.mark.parametrize(
        "first, second, message",
        [
            ("Kigali", "Nyanza", "Error: One or both cities not found."),
            ("2", "huye", "Error: Cannot create road between the same city."),
            ("2", "1", "Road already exists between these cities."),
        ],
    )
    def test_failures_leave_graph_unchanged(
        self, make_service, seeded, first, second, message
    ):
        service, console = make_service(first, second, network=seeded)
        service.add_road()
        assert message in console.lines
        assert len(seeded.roads) == 1


class TestAssignBudget:
    def test_no_roads(self, make_service):
        service, console = make_service()
        service.assign_budget()
        assert "No roads exist to assign budgets." in console.lines

    def test_success(self, make_service, seeded):
        service, console = make_service("Kigali", "Huye", "-3", "5.5", network=seeded)
        service.assign_budget()
        assert "Budget of 5.50 billion RWF assigned successfully." in console.lines
        assert seeded.roads.budget_between(1, 2) == 5.5

    def test_not_connected_does_not_ask_for_amount(self, make_service, seeded):
        service, console = make_service("Kigali", "Musanze", network=seeded)
        service.assign_budget()
        assert "Error: No road exists between these cities." in console.lines
        assert not any(line.startswith("Enter budget amount") for line in console.lines)
        assert seeded.budget_matrix()[0][2] == 0.0

    def test_unknown_city(self, make_service, seeded):
        service, console = make_service("Kigali", "9", network=seeded)
        service.assign_budget()
        assert "Error: One or both cities not found." in console.lines


class TestEditCity:
    def test_rename_cascades(self, make_service, seeded):
        service, console = make_service("2", "Huye-Town", network=seeded)
        service.edit_city()
        assert "Enter new name (current: Huye): " in console.lines
        assert "City updated successfully." in console.lines
        assert seeded.roads.roads()[0].label == "Kigali - Huye-Town"

    def test_not_found(self, make_service, seeded):
        service, console = make_service("Nyanza", network=seeded)
        service.edit_city()
        assert "City not found." in console.lines
        assert console.remaining == 0

    def test_empty_directory(self, make_service):
        service, console = make_service()
        service.edit_city()
        assert "No cities to edit." in console.lines


class TestSearchCity:
    def test_shows_connections(self, make_service, seeded):
        seeded.set_budget("1", "2", 2.0)
        service, console = make_service("kigali", network=seeded)
        service.search_city()
        assert "Index: 1" in console.lines
        assert "Name: Kigali" in console.lines
        assert "Connected to: Huye (2.00 billion RWF)" in console.lines

    def test_without_connections(self, make_service, seeded):
        service, console = make_service("3", network=seeded)
        service.search_city()
        assert "Connected to: No connected cities" in console.lines

    def test_not_found(self, make_service, seeded):
        service, console = make_service("12", network=seeded)
        service.search_city()
        assert "City not found." in console.lines


def test_show_roads_prints_connection_matrix(make_service, seeded):
    service, console = make_service(network=seeded)
    service.show_roads()
    assert "=== Connection Matrix ===" in console.lines
    assert f"{'Kigali':>12}{0:>5}{1:>5}{0:>5}" in console.lines
    assert f"{'Musanze':>12}{0:>5}{0:>5}{0:>5}" in console.lines


def test_show_roads_empty(make_service):
    service, console = make_service()
    service.show_roads()
    assert "No roads to display." in console.lines
    assert "=== Connection Matrix ===" not in console.lines


def test_show_all_includes_budget_matrix(make_service, seeded):
    seeded.set_budget("1", "2", 4.25)
    service, console = make_service(network=seeded)
    service.show_all()
    assert "=== List of Cities ===" in console.lines
    assert "=== Budget Adjacency Matrix ===" in console.lines
    assert f"{'Huye':>12}{'4.25':>12}{'-':>12}{'-':>12}" in console.lines


def test_save_reports_each_file(make_service, seeded, tmp_path):
    service, console = make_service(network=seeded)
    assert service.save() is True
    assert "Cities saved to cities.txt" in console.lines
    assert "Roads saved to roads.txt" in console.lines
    assert (tmp_path / "roads.txt").exists()


def test_load_reports_unreadable_file(make_service, seeded, tmp_path):
    (tmp_path / "cities.txt").write_bytes(b"\xff\xfe not a table")
    service, console = make_service(network=seeded)
    service.load()
    assert "Error loading data: Error reading cities.txt." in console.lines
    assert len(seeded.cities) == 3
    assert len(seeded.roads) == 1


def test_save_failure_is_reported(seeded, tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    console = ScriptedConsole()
    service = NetworkService(
        network=seeded,
        repository=FixedWidthTableRepository(StorageConfig(data_dir=blocker)),
        console=console,
        config=NetworkConfig(),
    )
    assert service.save() is False
    assert "Error saving cities to file." in console.lines
    assert "Error saving roads to file." in console.lines
    assert len(seeded.cities) == 3
