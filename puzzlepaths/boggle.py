"""A 5x5 word-search board and its exhaustive solver."""

from __future__ import annotations

import argparse
import random
from collections import defaultdict
from collections.abc import Iterable, Mapping
from os import PathLike

from .die import Die
from .trie import SearchResult, Trie

SIZE = 5
MIN_WORD_LENGTH = 4

DICE: tuple[tuple[str, ...], ...] = (
    ("N", "S", "C", "T", "E", "C"),
    ("A", "E", "A", "E", "E", "E"),
    ("H", "H", "L", "R", "O", "D"),
    ("O", "R", "W", "V", "G", "R"),
    ("S", "P", "R", "I", "Y", "Y"),
    ("S", "U", "E", "N", "S", "S"),
    ("M", "E", "A", "U", "E", "G"),
    ("S", "E", "P", "T", "I", "C"),
    ("D", "H", "H", "O", "W", "N"),
    ("L", "E", "P", "T", "I", "S"),
    ("S", "T", "L", "I", "E", "I"),
    ("A", "R", "S", "I", "Y", "F"),
    ("T", "E", "T", "I", "I", "I"),
    ("O", "T", "T", "T", "M", "E"),
    ("N", "M", "N", "E", "G", "A"),
    ("N", "N", "E", "N", "A", "D"),
    ("O", "U", "O", "T", "T", "O"),
    ("B", "Z", "J", "B", "X", "K"),
    ("A", "A", "F", "A", "S", "R"),
    ("T", "O", "O", "U", "W", "N"),
    ("O", "T", "H", "D", "D", "N"),
    ("R", "A", "A", "S", "F", "I"),
    ("H", "O", "D", "R", "L", "N"),
    ("E", "E", "E", "E", "A", "M"),
    ("He", "Qu", "Th", "In", "Er", "An"),
)

_NEIGHBOURS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


class BoggleBoard:
    """A 5x5 grid of dice searched for dictionary words."""

    def __init__(self, dictionary: Trie, faces: Iterable[str]) -> None:
        faces = list(faces)
        if len(faces) != SIZE * SIZE:
            raise ValueError(
                f"a board needs {SIZE * SIZE} faces, got {len(faces)}"
            )
        self.dictionary = dictionary
        self.grid = [
            [Die(face) for face in faces[row * SIZE:(row + 1) * SIZE]]
            for row in range(SIZE)
        ]

    @classmethod
    def random(
        cls, dictionary: Trie, rng: random.Random | None = None
    ) -> BoggleBoard:
        """Roll the standard dice and lay them out in random order."""
        rng = rng if rng is not None else random.Random()
        faces = [Die.roll(sides, rng).face for sides in DICE]
        rng.shuffle(faces)
        return cls(dictionary, faces)

    @classmethod
    def from_file(
        cls, dictionary: Trie, path: str | PathLike[str]
    ) -> BoggleBoard:
        """Read the first 25 whitespace-separated faces from a file."""
        with open(path, encoding="utf-8") as handle:
            faces = handle.read().split()[: SIZE * SIZE]
        return cls(dictionary, faces)

    def render(self) -> str:
        """Return the board as text, one row per line."""
        return "".join(
            "".join(die.face + (" " if len(die.face) > 1 else "  ") for die in row)
            + "\n"
            for row in self.grid
        )

    def solve(self) -> dict[int, set[str]]:
        """Find every word of four or more letters, grouped by length."""
        found: defaultdict[int, set[str]] = defaultdict(set)
        for row in range(SIZE):
            for col in range(SIZE):
                self._explore(row, col, "", found)
        return dict(found)

    def _explore(
        self, row: int, col: int, prefix: str, found: defaultdict[int, set[str]]
    ) -> None:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            return
        die = self.grid[row][col]
        if die.used:
            return
        word = prefix + die.face
        status = self.dictionary.search(word)
        if status is SearchResult.NOT_FOUND:
            return
        if len(word) >= MIN_WORD_LENGTH and status is SearchResult.FOUND:
            found[len(word)].add(word)
        die.used = True
        try:
            for dr, dc in _NEIGHBOURS:
                self._explore(row + dr, col + dc, word, found)
        finally:
            die.used = False


def format_solution(found: Mapping[int, Iterable[str]]) -> str:
    """Describe found words from the longest to the shortest."""
    lines = ["All possible values from longest to shortest\n"]
    for length in sorted(found, reverse=True):
        words = sorted(found[length])
        if not words:
            continue
        lines.append(f"Length: {length} letters\n")
        lines.append("".join(f"{word} " for word in words) + "\n")
    return "".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Show a board and every word that can be found on it."""
    parser = argparse.ArgumentParser(
        description="Solve a 5x5 word-search board."
    )
    parser.add_argument("dictionary", help="file of whitespace-separated words")
    parser.add_argument("--board", help="file with 25 faces instead of random dice")
    parser.add_argument("--seed", type=int, help="seed for the random board")
    args = parser.parse_args(argv)

    words = Trie.from_file(args.dictionary)
    if args.board:
        board = BoggleBoard.from_file(words, args.board)
    else:
        board = BoggleBoard.random(words, random.Random(args.seed))

    print(board.render(), end="")
    print(format_solution(board.solve()), end="")
    return 0