# puzzlepaths

Two small puzzle solvers in one package:

* **Boggle** – builds a 5x5 board, either by rolling the 25 standard big-board
  dice or by reading 25 faces from a file, then finds every dictionary word of
  four or more letters that can be traced through adjacent (including
  diagonal), unused dice.
* **Maze** – reads a grid of single-character cells (`S` start, `E` end,
  `B` blocked, anything else open), finds a path with depth-first backtracking
  or the shortest path with a breadth-first search, and draws the result.

## Install

```
pip install .
```

## Command line

Solve a random Boggle board against a word list (whitespace-separated words):

```
puzzlepaths-boggle dictionary.txt
```

Options:

* `--board FILE` – use the first 25 whitespace-separated faces in `FILE`
  instead of rolling dice.
* `--seed N` – seed the random roll and shuffle, so the same board comes back.

The board is printed, followed by every word found, grouped by length from
the longest to the shortest.

Find the shortest path through a maze file and show it:

```
puzzlepaths-maze maze.txt
```

Whitespace in the maze file is ignored; the cells are laid out row by row in
a square whose width is the integer square root of the cell count. The
command prints the shortest path length in cells, both ends included (or `-1`
when the end cannot be reached), the map itself, and an `O`/`X` picture of the
cells on the path. If the file cannot be read, holds no cells, has more than
one `S` or has none, it prints the problem to stderr and exits with status 1.

## Library use

```python
from puzzlepaths.trie import Trie, SearchResult
from puzzlepaths.boggle import BoggleBoard, format_solution

words = Trie(["tree", "trees", "reset"])
assert words.search("tre") is SearchResult.PARTIAL
assert words.search("TREE") is SearchResult.FOUND

board = BoggleBoard(words, ["T", "R", "E", "E", "S"] * 5)
print(board.render())
print(format_solution(board.solve()))
```

* `Trie` stores case-insensitive words of the letters a–z; `Trie.from_file`
  reads a word list, `insert` adds a word, `search` returns a `SearchResult`
  (`FOUND`, `PARTIAL` or `NOT_FOUND`), and iterating yields the words in
  alphabetical order. Non-letters raise `ValueError`.
* `BoggleBoard.random(dictionary, rng)` rolls the standard dice (`DICE`),
  `BoggleBoard.from_file(dictionary, path)` reads faces from a file, and
  `solve()` returns a dict from word length to the set of words found.
* `Die.roll(faces, rng)` makes a die showing a random face.

```python
from puzzlepaths.grid import Map
from puzzlepaths.tracker import Tracker

maze = Map.parse("S.B\n..B\nB.E\n")
print(Tracker(maze.start).find_shortest_path())
print(maze.render_path())
```

* `Map(symbols)`, `Map.parse(text)` and `Map.from_file(path)` build a map;
  `rows()` yields its `Cell`s row by row, `render()` and `render_path()` draw
  it. Problems raise `MapError`.
* `Tracker.find_path()` searches depth-first (north, east, south, west),
  printing each move and backtrack; `find_path_from(row, col)` first moves to
  the given cell; `find_shortest_path()` searches breadth-first. All of them
  mark the cells of the route as `on_path`. A tracker works on the map's cells
  in place, so use a fresh map for each search.

The maze solver is built on the package's own `DoublyLinkedList` (in
`puzzlepaths.linkedlist`, raising `DoublyLinkedListError`) and the `Queue`
and `Stack` in `puzzlepaths.containers`.

## What it does not do

There is no game to play: the Boggle side has no timer, no player input and
no scoring, and the board is always 5x5. The maze command runs only the
shortest-path search; the depth-first search is available from the library.

## Tests

```
pip install ".[test]"
pytest
```