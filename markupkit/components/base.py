"""
Base Component Class for markupkit

This module provides the fluent foundation for all UI components. A component
owns exactly one TagBuilder and exposes chainable mutators over it:

    Button("Save").id("btn1").width(120).margin(0, 8).disable().render()

Every mutator returns the component itself, typed as the concrete subclass,
so base-class calls and subclass calls can be mixed freely in one chain.

Usage precondition:
    Components are plain mutable objects for a single caller within one
    rendering pass. Sharing one instance between threads while mutating it
    is not supported and not guarded.
"""

from __future__ import annotations

import logging
from typing import Optional, TypeVar

from .. import config
from ..builders.tag import DataOptionValue, TagBuilder
from .units import box_shorthand, unit_value

TComponent = TypeVar("TComponent", bound="ComponentBase")


class ComponentBase:
    """Base class for all fluent UI components

    Subclasses supply the builder through `_create_tag_builder()`; the base
    calls it once, on first use, and keeps the result for the component's
    lifetime.

    Rendering runs a fixed pipeline:
        1. `_render_before()`  last chance to adjust the builder
        2. `_render()`         serialize, returns the markup
        3. `_render_after()`   observe the markup (trace logging)
    """

    def __init__(self) -> None:
        self._id: Optional[str] = None
        self._tag_builder: Optional[TagBuilder] = None

    # -- builder ---------------------------------------------------------

    def _create_tag_builder(self) -> TagBuilder:
        """Return the TagBuilder this component renders through."""
        raise NotImplementedError("Subclasses must implement _create_tag_builder()")

    @property
    def _builder(self) -> TagBuilder:
        if self._tag_builder is None:
            self._tag_builder = self._create_tag_builder()
        return self._tag_builder

    # -- reading ---------------------------------------------------------

    def get_id(self) -> Optional[str]:
        return self._id

    def get_attribute_value(self, name: str) -> Optional[str]:
        return self._builder.get(name)

    def get_class(self) -> Optional[str]:
        return self._builder.get("class")

    # -- attributes ------------------------------------------------------

    def add_attribute(self: TComponent, name: str, value: str) -> TComponent:
        """Add an attribute, e.g. `add_attribute("title", "Save changes")`.

        An existing attribute is overwritten in place; `class` and `style`
        values are merged into what is already there.
        """
        self._builder.add_attribute(name, value)
        return self

    def update_attribute(self: TComponent, name: str, value: str) -> TComponent:
        """Replace an attribute value, including `class` and `style` wholesale."""
        self._builder.update_attribute(name, value)
        return self

    def add_style(self: TComponent, name: str, value: str) -> TComponent:
        self._builder.add_style(name, value)
        return self

    def add_data_attribute(self: TComponent, name: str, value: str) -> TComponent:
        """Set `data-<name>`."""
        self._builder.add_data_attribute(name, value)
        return self

    def add_data_toggle(self: TComponent, value: str) -> TComponent:
        """Set `data-toggle`, e.g. `add_data_toggle("modal")`."""
        return self.add_data_attribute("toggle", value)

    def add_data_option(
        self: TComponent, name: str, value: DataOptionValue, quote: bool = False
    ) -> TComponent:
        """Add an entry to the consolidated `data-options` attribute.

        Args:
            name: Option name.
            value: str, bool or int; None (and "") is skipped.
            quote: Wrap string values in single quotes.
        """
        self._builder.add_data_option(name, value, quote)
        return self

    def class_(self: TComponent, value: str) -> TComponent:
        """Merge classes into the class list (union)."""
        self._builder.add_class(value)
        return self

    def update_class(self: TComponent, value: str) -> TComponent:
        self._builder.update_class(value)
        return self

    def id(self: TComponent, value: str) -> TComponent:
        self._id = value
        return self.update_attribute("id", value)

    # -- sizing / spacing ------------------------------------------------

    def width(self: TComponent, value: Optional[int], is_percent: bool = False) -> TComponent:
        """Set the inline width in px (or % with `is_percent`); None is ignored."""
        if value is None:
            return self
        return self.add_style("width", unit_value(value, is_percent))

    def height(self: TComponent, value: int) -> TComponent:
        return self.add_style("height", unit_value(value))

    def margin(self: TComponent, *values: int) -> TComponent:
        """Set the margin shorthand from 1, 2 or 4 pixel values."""
        return self.add_style("margin", box_shorthand(*values))

    def padding(self: TComponent, *values: int) -> TComponent:
        """Set the padding shorthand from 1, 2 or 4 pixel values."""
        return self.add_style("padding", box_shorthand(*values))

    # -- rendering -------------------------------------------------------

    def render(self) -> str:
        """Render the component as an HTML string

        Returns:
            str: HTML representation of the component
        """
        self._render_before()
        result = self._render()
        self._render_after(result)
        return result

    def _render_before(self) -> None:
        pass

    def _render(self) -> str:
        return str(self._builder)

    def _render_after(self, result: str) -> None:
        self._write_trace(result)

    def _write_trace(self, result: str) -> None:
        logger = logging.getLogger(config.trace_log_name())
        level = config.trace_level()
        if not logger.isEnabledFor(level):
            return
        logger.log(level, "rendered %s: %s", type(self).__qualname__, result)

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()
