"""
TagBuilder

Accumulates the attributes, classes, inline styles, data-attributes and
data-options of a single element and serializes them to one tag string.

Behavior:
    - Attributes render in insertion order. Setting an existing name keeps
      its position and replaces the value (no duplicate attributes).
    - `class`, `style` and `data-options` are composite slots. Their parts
      are merged by the dedicated methods and the slot is rewritten after
      every change; empty slots are not rendered.
    - Inner HTML is written verbatim. Use `set_inner_text` for untrusted text.

Security:
    Attribute values are escaped (&, <, >, ") on output. Attribute names and
    inner HTML are the caller's responsibility.
"""

from __future__ import annotations

import html
from typing import Dict, List, Optional, Union

DataOptionValue = Union[str, bool, int, None]

CLASS = "class"
STYLE = "style"
DATA_OPTIONS = "data-options"


def _escape_attr(value: str) -> str:
    return html.escape(value, quote=False).replace('"', "&quot;")


def encode_data_option(value: DataOptionValue, quote: bool = False) -> Optional[str]:
    """Encode a data-option value, or None when nothing should be written.

    Example:
        >>> encode_data_option("x", quote=True), encode_data_option(False), encode_data_option(None)
        ("'x'", 'false', None)
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if value == "":
        return None
    return f"'{value}'" if quote else value


class TagBuilder:
    """Mutable attribute bag for one HTML element."""

    def __init__(self, tag_name: str, *, self_closing: bool = False) -> None:
        self.tag_name = tag_name
        self.self_closing = self_closing
        self.inner_html = ""
        self._attributes: Dict[str, str] = {}
        self._classes: List[str] = []
        self._styles: Dict[str, str] = {}
        self._data_options: Dict[str, str] = {}

    # -- reading ---------------------------------------------------------

    def get(self, name: str) -> Optional[str]:
        """Current value of an attribute, including the composite slots."""
        return self._attributes.get(name)

    # -- plain attributes ------------------------------------------------

    def add_attribute(self, name: str, value: str) -> "TagBuilder":
        """Set an attribute; `class` and `style` values are merged."""
        if name == CLASS:
            return self.add_class(value)
        if name == STYLE:
            for prop, prop_value in self._parse_style(value).items():
                self._styles[prop] = prop_value
            self._sync_styles()
            return self
        self._attributes[name] = value
        return self

    def update_attribute(self, name: str, value: str) -> "TagBuilder":
        """Replace an attribute; `class` and `style` are replaced wholesale."""
        if name == CLASS:
            return self.update_class(value)
        if name == STYLE:
            self._styles = self._parse_style(value)
            self._sync_styles()
            return self
        self._attributes[name] = value
        return self

    # -- class -----------------------------------------------------------

    def add_class(self, value: str) -> "TagBuilder":
        for token in (value or "").split():
            if token not in self._classes:
                self._classes.append(token)
        self._sync_slot(CLASS, " ".join(self._classes))
        return self

    def update_class(self, value: str) -> "TagBuilder":
        self._classes = []
        return self.add_class(value)

    # -- style -----------------------------------------------------------

    def add_style(self, name: str, value: str) -> "TagBuilder":
        self._styles[name] = value
        self._sync_styles()
        return self

    @staticmethod
    def _parse_style(value: str) -> Dict[str, str]:
        styles: Dict[str, str] = {}
        for declaration in (value or "").split(";"):
            prop, sep, prop_value = declaration.partition(":")
            if sep and prop.strip():
                styles[prop.strip()] = prop_value.strip()
        return styles

    def _sync_styles(self) -> None:
        self._sync_slot(STYLE, "".join(f"{k}:{v};" for k, v in self._styles.items()))

    # -- data ------------------------------------------------------------

    def add_data_attribute(self, name: str, value: str) -> "TagBuilder":
        self._attributes[f"data-{name}"] = value
        return self

    def add_data_option(
        self, name: str, value: DataOptionValue, quote: bool = False
    ) -> "TagBuilder":
        """Add one `name:value` pair to the consolidated data-options slot.

        Absent (None) and empty string values are skipped.
        """
        encoded = encode_data_option(value, quote)
        if encoded is None:
            return self
        self._data_options[name] = encoded
        self._sync_slot(
            DATA_OPTIONS, ",".join(f"{k}:{v}" for k, v in self._data_options.items())
        )
        return self

    # -- content ---------------------------------------------------------

    def set_inner_html(self, text: Optional[str]) -> "TagBuilder":
        self.inner_html = text or ""
        return self

    def set_inner_text(self, text: Optional[str]) -> "TagBuilder":
        self.inner_html = html.escape(text or "")
        return self

    # -- output ----------------------------------------------------------

    def _sync_slot(self, name: str, value: str) -> None:
        # Keep the slot's first position; drop it while empty.
        if value:
            self._attributes[name] = value
        else:
            self._attributes.pop(name, None)

    def render_attributes(self) -> str:
        return " ".join(
            f'{name}="{_escape_attr(value)}"' for name, value in self._attributes.items()
        )

    def __str__(self) -> str:
        attrs = self.render_attributes()
        opening = f"<{self.tag_name} {attrs}" if attrs else f"<{self.tag_name}"
        if self.self_closing:
            return f"{opening} />"
        return f"{opening}>{self.inner_html}</{self.tag_name}>"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.tag_name!r}, attributes={self._attributes!r})"
