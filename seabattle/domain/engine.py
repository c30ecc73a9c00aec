import logging
import random
from dataclasses import replace
from typing import Optional, Tuple

from seabattle.layouts import LayoutDefinition, classic_layout, validate_layout

from .board import in_bounds, with_cell
from .config import OPPONENT_SCORE
from .field import generate_field
from .types import CellState, GameState, Mode, Ship

logger = logging.getLogger(__name__)


class InvalidCoordinate(IndexError):
    """A shot landed outside the grid while the game was in progress."""

    def __init__(self, x: int, y: int, board_size: int):
        super().__init__(f"({x}, {y}) is outside the {board_size}x{board_size} grid")
        self.x = x
        self.y = y
        self.board_size = board_size


def new_game(layout: Optional[LayoutDefinition] = None, rng: Optional[random.Random] = None) -> GameState:
    if layout is None:
        layout = classic_layout()
    errors = validate_layout(layout)
    if errors:
        raise ValueError(f"invalid layout {layout.layout_id!r}: " + "; ".join(errors))
    player = generate_field(layout.board_size, layout.ships, rng)
    return GameState(Mode.PLAYER_TURN, player, layout)


def reset(state: GameState, rng: Optional[random.Random] = None) -> GameState:
    logger.info("resetting game (%s)", state.layout.layout_id)
    player = generate_field(state.layout.board_size, state.layout.ships, rng)
    return GameState(Mode.PLAYER_TURN, player, state.layout)


def _damage(ships: Tuple[Ship, ...], index: int) -> Tuple[Ship, ...]:
    ship = ships[index]
    return ships[:index] + (replace(ship, life=max(ship.life - 1, 0)),) + ships[index + 1:]


def fire(state: GameState, x: int, y: int, rng: Optional[random.Random] = None) -> GameState:
    """
    Resolve one player action and return the next state.

    In GAME_OVER any action restarts the game and the coordinates are ignored.
    Firing at a cell that was already hit or missed returns ``state`` itself.
    """
    if state.mode is Mode.GAME_OVER:
        return reset(state, rng)

    grid = state.player.grid
    if not in_bounds(grid, x, y):
        raise InvalidCoordinate(x, y, len(grid))

    cell = grid[x][y]
    if cell.state in (CellState.HIT, CellState.MISS):
        return state

    ships = state.player.ships
    if cell.state is CellState.SHIP:
        grid = with_cell(grid, x, y, state=CellState.HIT)
        ships = _damage(ships, cell.ship_index)
        logger.debug("hit at (%d, %d) on ship %d", x, y, cell.ship_index)
    else:
        grid = with_cell(grid, x, y, state=CellState.MISS)

    # No ships at all counts as all sunk.
    all_sunk = all(ship.life == 0 for ship in ships)
    mode = Mode.GAME_OVER if all_sunk else Mode.PLAYER_TURN
    if all_sunk:
        logger.info("all ships sunk, score %d", sum(s.size - s.life for s in ships))
    return GameState(mode, replace(state.player, grid=grid, ships=ships), state.layout)


def score(state: GameState) -> int:
    return sum(ship.size - ship.life for ship in state.player.ships)


def scores(state: GameState) -> Tuple[int, int]:
    return score(state), OPPONENT_SCORE


def is_game_over(state: GameState) -> bool:
    return state.mode is Mode.GAME_OVER
