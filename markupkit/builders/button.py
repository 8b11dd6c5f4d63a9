"""
Button tag builder.
"""

from __future__ import annotations

from .tag import TagBuilder


class ButtonBuilder(TagBuilder):
    """`<button type="button">` so clicks never submit a surrounding form by accident."""

    def __init__(self) -> None:
        super().__init__("button")
        self.add_attribute("type", "button")
