from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ShipSpec:
    size: int
    image: str = ""  # opaque key for the renderer
    name: str = ""


@dataclass(frozen=True)
class LayoutDefinition:
    layout_id: str
    name: str
    board_size: int
    ships: Tuple[ShipSpec, ...]

    def ship_sizes(self) -> Tuple[int, ...]:
        return tuple(s.size for s in self.ships)
