import pytest

from dsakit.maze import (
    OPEN,
    VISITED,
    MazeError,
    default_maze,
    main,
    render_grid,
    solve_maze,
)


def _adjacent(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def test_default_maze_path_runs_from_corner_to_corner():
    path, _ = solve_maze(default_maze())
    assert path[0] == (0, 0)
    assert path[-1] == (7, 7)


def test_path_steps_are_adjacent_and_open():
    grid = default_maze()
    path, _ = solve_maze(grid)
    for a, b in zip(path, path[1:]):
        assert _adjacent(a, b)
    for x, y in path:
        assert grid[y][x] == OPEN


def test_path_has_no_repeated_cells():
    path, _ = solve_maze(default_maze())
    assert len(set(path)) == len(path)


def test_input_grid_is_not_modified():
    grid = default_maze()
    solve_maze(grid)
    assert grid == default_maze()


def test_explored_grid_marks_path_cells():
    path, explored = solve_maze(default_maze())
    for x, y in path[:-1]:
        assert explored[y][x] == VISITED


def test_start_equal_to_goal():
    path, _ = solve_maze([[0, 1], [1, 0]], start=(0, 0), goal=(0, 0))
    assert path == [(0, 0)]


def test_unreachable_goal_raises():
    with pytest.raises(MazeError):
        solve_maze([[0, 1], [1, 0]])


def test_backtracks_out_of_dead_end():
    grid = [
        [0, 0, 0],
        [0, 1, 1],
        [0, 0, 0],
    ]
    path, _ = solve_maze(grid)
    assert path[-1] == (2, 2)
    for a, b in zip(path, path[1:]):
        assert _adjacent(a, b)


def test_ragged_grid_raises():
    with pytest.raises(MazeError):
        solve_maze([[0, 0], [0]])


def test_empty_grid_raises():
    with pytest.raises(MazeError):
        solve_maze([])


def test_out_of_bounds_start_raises():
    with pytest.raises(MazeError):
        solve_maze(default_maze(), start=(8, 0))


def test_render_grid_format():
    assert render_grid([[0, 1], [2, 0]]) == " 0  1 \n 2  0 "


def test_render_line_count_matches_rows():
    assert len(render_grid(default_maze()).splitlines()) == len(default_maze())


def test_main_prints_exit(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "(7, 7)" in out
    assert " <- " in out