from __future__ import annotations

from typing import List, Sequence, Tuple

from ..domain.models import City, Road
from ..network.model import RoadNetwork


def format_city_table(cities: Sequence[City]) -> str:
    """Render the city list, or a notice when it is empty."""
    if not cities:
        return "No cities to display."
    lines = [
        "",
        "=== List of Cities ===",
        f"{'Index':>10}{'City Name':>20}",
        "-" * 30,
    ]
    lines += [f"{city.index:>10}{city.name:>20}" for city in cities]
    return "\n".join(lines)


def format_road_table(roads: Sequence[Road], currency: str = "RWF") -> str:
    if not roads:
        return "No roads to display."
    lines = [
        "",
        "=== Road Connections ===",
        f"{'ID':>5}{'Road':>25}{f'Budget ({currency})':>20}",
        "-" * 50,
    ]
    lines += [
        f"{seq:>5}{road.label:>25}{road.budget:>20.2f}"
        for seq, road in enumerate(roads, start=1)
    ]
    return "\n".join(lines)


def format_connection_matrix(network: RoadNetwork) -> str:
    """Render the 1/0 adjacency view, one row and column per city."""
    cities = network.cities.list_cities()
    matrix = network.adjacency_matrix()
    lines = [
        "",
        "=== Connection Matrix ===",
        "1 = Road exists, 0 = No road",
        "",
        f"{' ':>12}" + "".join(f"{city.index:>5}" for city in cities),
    ]
    for row_city in cities:
        row = matrix[row_city.index - 1]
        cells = "".join(f"{int(row[col.index - 1]):>5}" for col in cities)
        lines.append(f"{row_city.name:>12}{cells}")
    return "\n".join(lines)


def format_budget_matrix(network: RoadNetwork, currency: str = "billion RWF") -> str:
    """Render budgets between connected cities; ``-`` marks no road."""
    cities = network.cities.list_cities()
    if not cities:
        return "No cities available to display budget matrix."
    adjacency = network.adjacency_matrix()
    budgets = network.budget_matrix()
    lines = [
        "",
        "=== Budget Adjacency Matrix ===",
        f"Shows budget amounts between connected cities (in {currency})",
        "",
        f"{' ':>12}" + "".join(f"{city.index:>12}" for city in cities),
    ]
    for row_city in cities:
        i = row_city.index - 1
        cells: List[str] = []
        for col_city in cities:
            j = col_city.index - 1
            if adjacency[i][j]:
                cells.append(f"{budgets[i][j]:>12.2f}")
            else:
                cells.append(f"{'-':>12}")
        lines.append(f"{row_city.name:>12}" + "".join(cells))
    return "\n".join(lines)


def format_city_details(
    city: City, neighbors: Sequence[Tuple[str, float]], currency: str = "billion RWF"
) -> str:
    """Render a search result: index, name and connected cities."""
    if neighbors:
        connected = ", ".join(
            f"{name} ({budget:.2f} {currency})" for name, budget in neighbors
        )
    else:
        connected = "No connected cities"
    return "\n".join(
        [
            "",
            "City Details:",
            f"Index: {city.index}",
            f"Name: {city.name}",
            f"Connected to: {connected}",
        ]
    )
