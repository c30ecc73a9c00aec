from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Tuple

from .config import NO_SHIP

if TYPE_CHECKING:
    from seabattle.layouts.definition import LayoutDefinition, ShipSpec


class CellState(Enum):
    EMPTY = "empty"
    SHIP = "ship"
    HIT = "hit"
    MISS = "miss"


class Orientation(Enum):
    HORIZONTAL = 0
    VERTICAL = 1


class Mode(Enum):
    PLAYER_TURN = "player-1"
    GAME_OVER = "over"


@dataclass(frozen=True)
class Cell:
    x: int
    y: int
    state: CellState = CellState.EMPTY
    ship_index: int = NO_SHIP


# Indexed grid[x][y]; one tuple per column.
Grid = Tuple[Tuple[Cell, ...], ...]


@dataclass(frozen=True)
class Placement:
    x: int
    y: int
    orientation: Orientation


@dataclass(frozen=True)
class Ship:
    index: int
    size: int
    life: int
    image: str = ""
    name: str = ""

    @property
    def sunk(self) -> bool:
        return self.life == 0


@dataclass(frozen=True)
class Field:
    grid: Grid
    ships: Tuple[Ship, ...] = ()
    # Specs the generator had no room for.
    unplaced: Tuple["ShipSpec", ...] = ()

    @property
    def size(self) -> int:
        return len(self.grid)


@dataclass(frozen=True)
class GameState:
    mode: Mode
    player: Field
    layout: "LayoutDefinition"
