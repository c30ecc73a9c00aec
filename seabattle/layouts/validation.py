from typing import List

from .definition import LayoutDefinition, ShipSpec


def validate_layout(layout: LayoutDefinition) -> List[str]:
    errors: List[str] = []

    if layout.board_size <= 0:
        errors.append("board_size must be positive")

    if not layout.ships:
        errors.append("layout must define at least one ship")

    for i, ship in enumerate(layout.ships):
        _validate_ship(i, ship, layout.board_size, errors)

    return errors


def _validate_ship(i: int, ship: ShipSpec, board_size: int, errors: List[str]) -> None:
    label = ship.name or f"#{i}"
    if ship.size <= 0:
        errors.append(f"ship {label} must have size > 0")
    elif board_size > 0 and ship.size > board_size:
        errors.append(f"ship {label} (size {ship.size}) does not fit a {board_size}x{board_size} board")
