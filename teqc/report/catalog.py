"""Catalog of satellites seen while decoding a TEQC report

Description:
------------

Each satellite gets a fixed column in the decoded value table the first time it is seen in a report. The catalog keeps
the satellites in first-seen order, which is also the column order of the decoded table.

"""

# Standard library imports
from typing import Dict, Iterator, List, Sequence, Tuple

# Teqc imports
from teqc.lib import exceptions


class SatelliteCatalog:
    """Append-only, ordered set of satellite identifiers

    Attributes:
        max_size (Int):   Maximum number of satellites, 0 for no limit.
    """

    def __init__(self, max_size: int = 0) -> None:
        self.max_size = max_size
        self._columns: Dict[str, int] = dict()

    def resolve(self, satellites: Sequence[str]) -> List[int]:
        """Find column indices for the satellites of one epoch

        Satellites not already in the catalog are appended in the order they are given.

        Args:
            satellites:   Satellite identifiers in the order they appear in the report.

        Returns:
            Column index for each of the given satellites.
        """
        new_satellites = [s for s in dict.fromkeys(satellites) if s not in self._columns]
        if self.max_size and len(self._columns) + len(new_satellites) > self.max_size:
            raise exceptions.CatalogFullError(
                f"More than {self.max_size} satellites in report, can not add {', '.join(new_satellites)}"
            )

        for satellite in new_satellites:
            self._columns[satellite] = len(self._columns)

        return [self._columns[s] for s in satellites]

    @property
    def satellites(self) -> Tuple[str, ...]:
        """Satellites in first-seen order"""
        return tuple(self._columns)

    def __contains__(self, satellite: str) -> bool:
        return satellite in self._columns

    def __iter__(self) -> Iterator[str]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({', '.join(self._columns)})"
