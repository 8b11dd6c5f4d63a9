# markupkit Component System
# Fluent components over a single owned TagBuilder

from .base import ComponentBase
from .button import ButtonBase, Button
from .units import unit_value, box_shorthand

__all__ = [
    "ComponentBase",
    "ButtonBase",
    "Button",
    "unit_value",
    "box_shorthand",
]
