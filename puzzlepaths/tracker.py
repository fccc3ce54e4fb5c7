"""Path finding through a map: depth-first search and breadth-first search."""

from __future__ import annotations

import argparse
import sys

from .containers import Queue, Stack
from .grid import BLOCKED, END, START, Cell, Map, MapError


def _open(cell: Cell | None) -> bool:
    return cell is not None and not cell.traversed and cell.type != BLOCKED


def _describe(cell: Cell) -> str:
    return f"X: {cell.col} Y: {cell.row} Type: {cell.type}"


class Tracker:
    """Walks a map from a cell, marking the cells of the path it finds."""

    def __init__(self, cell: Cell | None) -> None:
        if cell is None:
            raise ValueError("a tracker needs a cell to start from")
        self.cell: Cell = cell

    def find_path(self) -> bool:
        """Search depth-first for the end, reporting each move on stdout.

        Neighbours are tried north, east, south, west. Cells of the route
        found are marked as on the path.
        """
        route: Stack[Cell] = Stack()
        while self.cell.type != END:
            current = self.cell
            current.traversed = True
            current.on_path = True
            for name, neighbour in (
                ("North", current.north),
                ("East", current.east),
                ("South", current.south),
                ("West", current.west),
            ):
                if _open(neighbour):
                    assert neighbour is not None
                    print(f"Going {name} {_describe(neighbour)}")
                    route.push(current)
                    self.cell = neighbour
                    break
            else:
                current.on_path = False
                if route.is_empty():
                    return False
                self.cell = route.pop()
                print(f"Backtracking from {_describe(current)} to {_describe(self.cell)}")
        self.cell.on_path = True
        return True

    def find_path_from(self, row: int, col: int) -> bool:
        """Move to the given cell and search depth-first from there."""
        cell: Cell | None = self.cell
        while cell is not None and cell.row < row:
            cell = cell.south
        while cell is not None and cell.row > row:
            cell = cell.north
        while cell is not None and cell.col < col:
            cell = cell.east
        while cell is not None and cell.col > col:
            cell = cell.west
        if cell is None or cell.type == BLOCKED:
            return False
        self.cell = cell
        return self.find_path()

    def find_shortest_path(self) -> int:
        """Search breadth-first for the end and mark the route found.

        Returns the number of cells on the route, both ends included, or -1
        when the end cannot be reached.
        """
        origin = self.cell
        pending: Queue[Cell] = Queue([origin])
        previous: dict[Cell, Cell] = {}
        while self.cell.type != END and not pending.is_empty():
            current = self.cell
            for neighbour in (current.north, current.south, current.east, current.west):
                if _open(neighbour):
                    assert neighbour is not None
                    pending.enqueue(neighbour)
                    previous[neighbour] = current
            current.traversed = True
            self.cell = pending.dequeue()

        if self.cell.type != END:
            return -1
        count = 1
        cell = self.cell
        while cell is not origin and cell.type != START:
            cell.on_path = True
            cell = previous[cell]
            count += 1
        cell.on_path = True
        return count


def main(argv: list[str] | None = None) -> int:
    """Print the shortest path length, the map and the path through it."""
    parser = argparse.ArgumentParser(description="Find a path through a grid map.")
    parser.add_argument("map", help="file of cell symbols, S start, E end, B blocked")
    args = parser.parse_args(argv)

    try:
        grid = Map.from_file(args.map)
        tracker = Tracker(grid.start)
    except (MapError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1

    print(tracker.find_shortest_path())
    print(grid.render(), end="")
    print()
    print(grid.render_path(), end="")
    return 0