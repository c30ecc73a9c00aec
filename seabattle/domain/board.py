from dataclasses import replace
from typing import Iterator, List, Set

from .config import BOARD_SIZE
from .types import Cell, CellState, Grid


def create_grid(board_size: int = BOARD_SIZE) -> Grid:
    return tuple(
        tuple(Cell(x, y) for y in range(board_size))
        for x in range(board_size)
    )


def in_bounds(grid: Grid, x: int, y: int) -> bool:
    return 0 <= x < len(grid) and 0 <= y < len(grid[x])


def with_cell(grid: Grid, x: int, y: int, **patch) -> Grid:
    """Return ``grid`` with cell (x, y) updated; out-of-bounds leaves it untouched."""
    if not in_bounds(grid, x, y):
        return grid
    column = grid[x]
    new_column = column[:y] + (replace(column[y], **patch),) + column[y + 1:]
    return grid[:x] + (new_column,) + grid[x + 1:]


def neighbors_orthogonal(grid: Grid, x: int, y: int) -> Set[Cell]:
    """The cell plus its up/down/left/right neighbours, clamped to the grid edge."""
    min_x = max(x - 1, 0)
    min_y = max(y - 1, 0)
    max_x = min(x + 1, len(grid) - 1)
    max_y = min(y + 1, len(grid[0]) - 1)
    return {grid[x][y], grid[min_x][y], grid[x][min_y], grid[max_x][y], grid[x][max_y]}


def iter_cells(grid: Grid) -> Iterator[Cell]:
    for column in grid:
        yield from column


def marked_cells(grid: Grid) -> List[Cell]:
    """Cells already fired upon (the ones that get an overlay marker)."""
    return [c for c in iter_cells(grid) if c.state in (CellState.HIT, CellState.MISS)]
