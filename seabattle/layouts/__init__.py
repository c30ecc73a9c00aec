from .builtins import classic_layout
from .definition import LayoutDefinition, ShipSpec
from .validation import validate_layout

__all__ = [
    "LayoutDefinition",
    "ShipSpec",
    "classic_layout",
    "validate_layout",
]
