"""Depth-first maze solving with an explicit stack of positions."""

from __future__ import annotations

from collections.abc import Sequence

Position = tuple[int, int]

OPEN = 0
WALL = 1
VISITED = 2

# Offsets tried in order: up, right, down, left, as (dx, dy).
DIRECTIONS: tuple[Position, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))

_DEFAULT_MAZE = (
    (0, 0, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 0, 1),
    (1, 1, 1, 0, 1, 1, 1, 1),
    (1, 1, 1, 0, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 0, 1),
    (1, 0, 1, 1, 1, 1, 1, 1),
    (1, 0, 0, 0, 0, 0, 0, 0),
    (1, 1, 1, 1, 1, 1, 1, 0),
)


class MazeError(Exception):
    """Raised for a malformed maze or one with no way to the goal."""


def default_maze() -> list[list[int]]:
    """Return a fresh copy of the built-in 8x8 maze (0 open, 1 wall)."""
    return [list(row) for row in _DEFAULT_MAZE]


def _step(cells: list[list[int]], position: Position) -> Position | None:
    x, y = position
    height, width = len(cells), len(cells[0])
    for dx, dy in DIRECTIONS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < width and 0 <= ny < height:
            cells[y][x] = VISITED
            if cells[ny][nx] == OPEN:
                return nx, ny
    return None


def solve_maze(
    grid: Sequence[Sequence[int]],
    start: Position = (0, 0),
    goal: Position | None = None,
) -> tuple[list[Position], list[list[int]]]:
    """Walk from start to goal, always taking the first open neighbour.

    Returns the path as (x, y) positions from start to goal, and a copy of
    the grid with every explored cell marked ``VISITED``. The goal defaults
    to the bottom-right corner. The given grid is not changed.
    """
    cells = [list(row) for row in grid]
    if not cells or not cells[0] or any(len(row) != len(cells[0]) for row in cells):
        raise MazeError("maze must be a non-empty rectangle")
    height, width = len(cells), len(cells[0])
    if goal is None:
        goal = (width - 1, height - 1)
    for name, (x, y) in (("start", start), ("goal", goal)):
        if not (0 <= x < width and 0 <= y < height):
            raise MazeError(f"{name} {(x, y)} lies outside the maze")

    stack: list[Position] = [start]
    while stack[-1] != goal:
        nxt = _step(cells, stack[-1])
        if nxt is not None:
            stack.append(nxt)
            continue
        stack.pop()
        if not stack:
            raise MazeError("the goal cannot be reached")
    return stack, cells


def render_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render the grid one row per line, each cell as `` n ``."""
    return "\n".join("".join(f" {cell} " for cell in row) for row in grid)


def main(argv: list[str] | None = None) -> int:
    """Solve the built-in maze and print the exit, the explored map and the path."""
    path, explored = solve_maze(default_maze())
    exit_x, exit_y = path[-1]
    print()
    print(f" The exit is at ({exit_x}, {exit_y}).")
    print()
    print(render_grid(explored))
    print()
    print(" <- ".join(f"({x}, {y})" for x, y in reversed(path[1:])))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())