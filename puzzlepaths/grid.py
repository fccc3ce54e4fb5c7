"""A square grid of cells linked to their four neighbours."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from os import PathLike

START = "S"
END = "E"
BLOCKED = "B"


class MapError(Exception):
    """Raised when a map cannot be read or is malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(eq=False)
class Cell:
    """One square of a map, with links to the squares around it.

    Cells compare and hash by identity so they can key dictionaries.
    """

    type: str
    row: int
    col: int
    north: Cell | None = field(default=None, repr=False)
    south: Cell | None = field(default=None, repr=False)
    east: Cell | None = field(default=None, repr=False)
    west: Cell | None = field(default=None, repr=False)
    on_path: bool = False
    traversed: bool = False


class Map:
    """Cells laid out row by row, each row ``dimension`` cells wide."""

    def __init__(self, symbols: Iterable[str]) -> None:
        types = list(symbols)
        if not types:
            raise MapError("Empty Map")
        count = len(types)
        self.dimension = math.isqrt(count)
        width = self.dimension
        self.start: Cell | None = None

        cells: list[Cell] = []
        for index, kind in enumerate(types):
            row, col = divmod(index, width)
            cell = Cell(kind, row, col)
            if kind == START:
                if self.start is not None:
                    raise MapError("More Than One Starting Cell")
                self.start = cell
            cells.append(cell)

        for index, cell in enumerate(cells):
            if index % width != 0:
                cell.west = cells[index - 1]
            if index % width != width - 1 and index + 1 < count:
                cell.east = cells[index + 1]
            if index >= width:
                cell.north = cells[index - width]
            if index < count - width:
                cell.south = cells[index + width]

        self._top_left = cells[0]

    @classmethod
    def parse(cls, text: str) -> Map:
        """Build a map from text, ignoring all whitespace."""
        return cls(ch for ch in text if not ch.isspace())

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> Map:
        """Read a map from a file of cell symbols."""
        try:
            with open(path, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            raise MapError("File Read Error") from exc
        return cls.parse(text)

    def rows(self) -> Iterator[list[Cell]]:
        """Yield the cells one row at a time, from the top."""
        left: Cell | None = self._top_left
        while left is not None:
            row: list[Cell] = []
            cell: Cell | None = left
            while cell is not None:
                row.append(cell)
                cell = cell.east
            yield row
            left = left.south

    def render(self) -> str:
        """Return the cell symbols as text, one row per line."""
        return "".join(
            "".join(f"{cell.type} " for cell in row) + "\n" for row in self.rows()
        )

    def render_path(self) -> str:
        """Return the grid with cells on the path as O and others as X."""
        return "".join(
            "".join("O " if cell.on_path else "X " for cell in row) + "\n"
            for row in self.rows()
        )