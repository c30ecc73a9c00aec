from typing import List, Tuple

from .board import neighbors_orthogonal
from .config import NO_SHIP
from .types import Grid, Orientation, Placement


def _ship_around(grid: Grid, x: int, y: int) -> bool:
    return any(cell.ship_index != NO_SHIP for cell in neighbors_orthogonal(grid, x, y))


def find_placements(grid: Grid, ship_length: int) -> List[Placement]:
    """Every anchor/orientation where a ship fits without touching another ship edge-to-edge.

    Anchors are visited with x as the outer loop. Diagonal contact is allowed.
    """
    board_size = len(grid)
    placements: List[Placement] = []
    for x in range(board_size):
        for y in range(board_size):
            # horizontal run along x
            if x + ship_length <= board_size:
                if not any(_ship_around(grid, i, y) for i in range(x, x + ship_length)):
                    placements.append(Placement(x, y, Orientation.HORIZONTAL))
            # vertical run along y
            if y + ship_length <= board_size:
                if not any(_ship_around(grid, x, j) for j in range(y, y + ship_length)):
                    placements.append(Placement(x, y, Orientation.VERTICAL))
    return placements


def placement_cells(placement: Placement, length: int) -> Tuple[Tuple[int, int], ...]:
    if placement.orientation is Orientation.HORIZONTAL:
        return tuple((placement.x + i, placement.y) for i in range(length))
    return tuple((placement.x, placement.y + j) for j in range(length))
