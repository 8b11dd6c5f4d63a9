"""
Button components.

`ButtonBase` shows how a widget extends ComponentBase: it brings its own
builder, seeds it at construction and adds widget-specific mutators that
chain like the inherited ones.
"""

from __future__ import annotations

from ..builders.button import ButtonBuilder
from ..builders.tag import TagBuilder
from .base import ComponentBase, TComponent


class ButtonBase(ComponentBase):
    """Clickable button with text content."""

    def __init__(self, text: str) -> None:
        """
        Args:
            text: Button label, written as inner HTML (may be empty)
        """
        super().__init__()
        self._button_builder = ButtonBuilder()
        self._button_builder.set_inner_html(text)

    def _create_tag_builder(self) -> TagBuilder:
        return self._button_builder

    def disable(self: TComponent) -> TComponent:
        return self.add_attribute("disabled", "disabled")

    def click(self: TComponent, handler: str) -> TComponent:
        """Set the click handler: a function name or inline JS, passed through untouched."""
        return self.add_attribute("onClick", handler)


class Button(ButtonBase):
    """Plain button; `type="button"` unless turned into a form submit."""

    def submit(self) -> "Button":
        return self.update_attribute("type", "submit")
