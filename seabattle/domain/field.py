import logging
import random
from typing import List, Optional, Sequence

from .board import create_grid, with_cell
from .placements import find_placements, placement_cells
from .rng import pick
from .types import CellState, Field, Grid, Placement, Ship

logger = logging.getLogger(__name__)


def place_ship(grid: Grid, ship: Ship, placement: Placement) -> Grid:
    for x, y in placement_cells(placement, ship.size):
        grid = with_cell(grid, x, y, state=CellState.SHIP, ship_index=ship.index)
    return grid


def generate_field(
    board_size: int,
    ship_specs: Sequence,
    rng: Optional[random.Random] = None,
) -> Field:
    """
    Place ``ship_specs`` (objects with ``size`` and ``image``) one after another
    on a fresh grid, each at a random spot from ``find_placements``.

    Placement is greedy: a ship that no longer fits is dropped (logged and
    listed in ``Field.unplaced``) and earlier ships are never moved.
    """
    grid = create_grid(board_size)
    ships: List[Ship] = []
    unplaced = []

    for spec in ship_specs:
        placements = find_placements(grid, spec.size)
        if not placements:
            logger.warning(
                "PlacementExhausted: no room for ship %s (size %d) on %dx%d grid",
                getattr(spec, "name", "") or spec.image or "?",
                spec.size,
                board_size,
                board_size,
            )
            unplaced.append(spec)
            continue
        ship = Ship(
            index=len(ships),
            size=spec.size,
            life=spec.size,
            image=spec.image,
            name=getattr(spec, "name", ""),
        )
        grid = place_ship(grid, ship, pick(placements, rng))
        ships.append(ship)

    logger.debug("generated %dx%d field with %d ships", board_size, board_size, len(ships))
    return Field(grid, tuple(ships), tuple(unplaced))
