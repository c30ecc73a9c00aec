from .definition import LayoutDefinition, ShipSpec


def classic_layout() -> LayoutDefinition:
    # Largest first: the generator is greedy, so this order fits best.
    ships = (
        ShipSpec(size=5, image="aircraft-shape", name="Carrier"),
        ShipSpec(size=4, image="battleship-shape", name="Battleship"),
        ShipSpec(size=3, image="cruiser-shape", name="Cruiser"),
        ShipSpec(size=3, image="submarine-shape", name="Submarine"),
        ShipSpec(size=2, image="destroyer-shape", name="Destroyer"),
    )
    return LayoutDefinition(
        layout_id="classic",
        name="Classic Battleship (10x10)",
        board_size=10,
        ships=ships,
    )
