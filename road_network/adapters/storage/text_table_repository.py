"""Fixed-width text table repository.

Persists the network as two human-readable tables:

cities.txt::

         Index           City_name
             1              Kigali

roads.txt::

       ID                     Road              Budget
        1            Kigali - Huye                5.50

Loading rebuilds the road graph by resolving the city names found in the
road table against the freshly loaded city table.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from ...config import StorageConfig, get_config
from ...domain.errors import PersistenceError, RoadNetworkError
from ...network.cities import CityDirectory
from ...network.model import RoadNetwork

CITY_HEADER = f"{'Index':>10}{'City_name':>20}"
ROAD_HEADER = f"{'ID':>5}{'Road':>25}{'Budget':>20}"
ROAD_SEPARATOR = " - "

_CITY_ROW = re.compile(r"^\s*(\d+)\s*(\S.*?)\s*$")
_ROAD_ROW = re.compile(r"^\s*(\d+)\s*(\S.*?)\s*(\d+(?:\.\d+)?)\s*$")


def format_city_row(index: int, name: str) -> str:
    return f"{index:>10}{name:>20}"


def format_road_row(seq: int, label: str, budget: float) -> str:
    return f"{seq:>5}{label:>25}{budget:>20.2f}"


def split_road_label(
    label: str, cities: CityDirectory
) -> Optional[Tuple[int, int]]:
    """Split ``"city1 - city2"`` into two known city indices.

    City names never hold a hyphen next to whitespace, so a well-formed
    label contains the separator exactly once.
    """
    parts = label.split(ROAD_SEPARATOR)
    if len(parts) != 2:
        return None
    left = cities.resolve(parts[0])
    right = cities.resolve(parts[1])
    if left is None or right is None:
        return None
    return left, right


@dataclass
class FixedWidthTableRepository:
    """Network repository backed by two fixed-width text files.

    This adapter implements NetworkRepositoryPort.

    Attributes:
        config: Storage configuration (directory, file names, encoding)
    """

    config: StorageConfig = field(default_factory=lambda: get_config().storage)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # ---- Saving -----------------------------------------------------------
    def save_cities(self, network: RoadNetwork) -> Path:
        """Write the city table.

        Raises:
            PersistenceError: If the file cannot be written.
        """
        lines = [CITY_HEADER] + [
            format_city_row(city.index, city.name)
            for city in network.cities.list_cities()
        ]
        return self._write_table(self.config.cities_path, lines)

    def save_roads(self, network: RoadNetwork) -> Path:
        """Write the road table, numbering roads from 1 in insertion order.

        Raises:
            PersistenceError: If the file cannot be written.
        """
        lines = [ROAD_HEADER] + [
            format_road_row(seq, road.label, road.budget)
            for seq, road in enumerate(network.roads.roads(), start=1)
        ]
        return self._write_table(self.config.roads_path, lines)

    def save(self, network: RoadNetwork) -> List[Path]:
        """Write both tables.

        The road table is attempted even if the city table fails; the
        first failure is raised afterwards.

        Returns:
            Paths of the files written.
        """
        written: List[Path] = []
        failure: Optional[PersistenceError] = None
        for writer in (self.save_cities, self.save_roads):
            try:
                written.append(writer(network))
            except PersistenceError as e:
                failure = failure or e
        if failure is not None:
            raise failure
        return written

    def _write_table(self, path: Path, lines: List[str]) -> Path:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding=self.config.encoding) as f:
                for line in lines:
                    f.write(line + "\n")
        except OSError as e:
            self._logger.error(
                "Failed to write table", extra={"path": str(path), "error": str(e)}
            )
            raise PersistenceError(
                f"Error saving {path.name}", file_path=str(path), cause=e
            )
        self._logger.info(
            "Table saved", extra={"path": str(path), "rows": len(lines) - 1}
        )
        return path

    # ---- Loading ----------------------------------------------------------
    def load(self, network: RoadNetwork) -> None:
        """Repopulate ``network`` from whichever tables exist.

        Reloading the city table also drops the roads, since they refer to
        cities by index. Unparseable or inconsistent rows are skipped with
        a warning.

        Raises:
            PersistenceError: If an existing file cannot be read. Both files
                are read before anything is replaced, so the network is left
                untouched in that case.
        """
        cities_path = self.config.cities_path
        roads_path = self.config.roads_path

        city_rows = self._read_rows(cities_path) if cities_path.exists() else None
        road_rows = self._read_rows(roads_path) if roads_path.exists() else None

        if city_rows is not None:
            network.clear()
            for lineno, line in city_rows:
                self._load_city(network, line, cities_path, lineno)
            self._logger.info(
                "Cities loaded", extra={"count": len(network.cities)}
            )

        if road_rows is not None:
            network.roads.clear()
            for lineno, line in road_rows:
                self._load_road(network, line, roads_path, lineno)
            self._logger.info("Roads loaded", extra={"count": len(network.roads)})

    def _read_rows(self, path: Path) -> List[Tuple[int, str]]:
        """Return ``(line number, text)`` for every non-empty row after the header."""
        try:
            with path.open(encoding=self.config.encoding) as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(
                f"Error reading {path.name}", file_path=str(path), cause=e
            )
        return [
            (lineno, line)
            for lineno, line in enumerate(lines[1:], start=2)
            if line.strip()
        ]

    def _load_city(
        self, network: RoadNetwork, line: str, path: Path, lineno: int
    ) -> None:
        match = _CITY_ROW.match(line)
        if match is None:
            self._skip(path, lineno, "unparseable city row")
            return
        try:
            network.cities.restore(int(match.group(1)), match.group(2))
        except (RoadNetworkError, ValueError) as e:
            self._skip(path, lineno, str(e))

    def _load_road(
        self, network: RoadNetwork, line: str, path: Path, lineno: int
    ) -> None:
        match = _ROAD_ROW.match(line)
        if match is None:
            self._skip(path, lineno, "unparseable road row")
            return
        pair = split_road_label(match.group(2), network.cities)
        if pair is None:
            self._skip(path, lineno, f"unknown cities in '{match.group(2)}'")
            return
        index_a, index_b = pair
        try:
            network.roads.connect(
                index_a,
                index_b,
                network.cities.name_of(index_a),
                network.cities.name_of(index_b),
            )
            network.roads.set_budget(index_a, index_b, float(match.group(3)))
        except (RoadNetworkError, ValueError) as e:
            self._skip(path, lineno, str(e))

    def _skip(self, path: Path, lineno: int, reason: str) -> None:
        self._logger.warning(
            "Skipping row",
            extra={"path": str(path), "line": lineno, "reason": reason},
        )
