"markupkit: fluent server-side markup components"

from .builders import ButtonBuilder, TagBuilder
from .components import Button, ButtonBase, ComponentBase

__all__ = [
    "TagBuilder",
    "ButtonBuilder",
    "ComponentBase",
    "ButtonBase",
    "Button",
]
