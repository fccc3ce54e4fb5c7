import pytest

from puzzlepaths.grid import Map
from puzzlepaths.tracker import Tracker, main

CORRIDOR = "SOO\nBBO\nEOO\n"
DETOUR = "SOB\nOBE\nOOO\n"
WALLED = "SB\nBE\n"
OPEN = "SOO\nOOO\nOOE\n"


def _cells(grid):
    return [cell for row in grid.rows() for cell in row]


def test_shortest_path_through_corridor():
    grid = Map.parse(CORRIDOR)
    count = Tracker(grid.start).find_shortest_path()
    assert count == 7
    assert grid.render_path().count("O") == count


def test_shortest_path_unreachable():
    grid = Map.parse(WALLED)
    assert Tracker(grid.start).find_shortest_path() == -1
    assert "O" not in grid.render_path()


def test_shortest_path_marks_both_ends_and_avoids_blocks():
    grid = Map.parse(DETOUR)
    count = Tracker(grid.start).find_shortest_path()
    on_path = [cell for cell in _cells(grid) if cell.on_path]
    assert len(on_path) == count
    assert {cell.type for cell in on_path} >= {"S", "E"}
    assert all(cell.type != "B" for cell in on_path)


def test_shortest_path_is_connected_chain():
    grid = Map.parse(OPEN)
    count = Tracker(grid.start).find_shortest_path()
    on_path = [cell for cell in _cells(grid) if cell.on_path]
    assert len(on_path) == count
    for cell in on_path:
        if cell.type in ("S", "E"):
            continue
        links = [cell.north, cell.south, cell.east, cell.west]
        assert sum(1 for n in links if n is not None and n.on_path) >= 2


def test_shortest_not_longer_than_depth_first():
    shortest_grid = Map.parse(DETOUR)
    shortest = Tracker(shortest_grid.start).find_shortest_path()
    dfs_grid = Map.parse(DETOUR)
    assert Tracker(dfs_grid.start).find_path() is True
    assert shortest <= dfs_grid.render_path().count("O")


def test_find_path_corridor(capsys):
    grid = Map.parse(CORRIDOR)
    assert Tracker(grid.start).find_path() is True
    assert grid.render_path() == "O O O \nX X O \nO O O \n"
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "Going East X: 1 Y: 0 Type: O"
    assert "Backtracking" not in out


def test_find_path_backtracks(capsys):
    grid = Map.parse(DETOUR)
    assert Tracker(grid.start).find_path() is True
    out = capsys.readouterr().out
    assert (
        "Backtracking from X: 1 Y: 0 Type: O to X: 0 Y: 0 Type: S" in out
    )
    first_row = next(grid.rows())
    assert first_row[0].on_path is True
    assert first_row[1].on_path is False
    assert first_row[1].traversed is True


def test_find_path_no_route(capsys):
    grid = Map.parse(WALLED)
    assert Tracker(grid.start).find_path() is False
    assert "Going" not in capsys.readouterr().out
    assert "O" not in grid.render_path()


def test_find_path_leaves_tracker_on_end():
    grid = Map.parse(CORRIDOR)
    tracker = Tracker(grid.start)
    tracker.find_path()
    assert tracker.cell.type == "E"


def test_find_path_from_blocked_cell():
    grid = Map.parse(CORRIDOR)
    assert Tracker(grid.start).find_path_from(1, 0) is False


def test_find_path_from_outside_map():
    grid = Map.parse(CORRIDOR)
    assert Tracker(grid.start).find_path_from(5, 0) is False
    assert Tracker(grid.start).find_path_from(0, -1) is False


def test_find_path_from_end_cell():
    grid = Map.parse(CORRIDOR)
    tracker = Tracker(grid.start)
    assert tracker.find_path_from(2, 0) is True
    assert grid.render_path().count("O") == 1


def test_find_path_from_other_cell():
    grid = Map.parse(CORRIDOR)
    tracker = Tracker(grid.start)
    assert tracker.find_path_from(0, 2) is True
    rows = list(grid.rows())
    assert rows[0][0].on_path is False
    assert rows[0][2].on_path is True
    assert rows[2][0].on_path is True


def test_tracker_needs_cell():
    with pytest.raises(ValueError):
        Tracker(Map.parse("OO\nOE").start)


def test_main_prints_length_and_maps(tmp_path, capsys):
    path = tmp_path / "map.txt"
    path.write_text(CORRIDOR, encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out

    expected_grid = Map.from_file(path)
    expected_count = Tracker(expected_grid.start).find_shortest_path()
    assert out == (
        f"{expected_count}\n"
        + expected_grid.render()
        + "\n"
        + expected_grid.render_path()
    )


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert "File Read Error" in capsys.readouterr().err