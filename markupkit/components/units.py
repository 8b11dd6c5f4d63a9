"""
CSS unit helpers shared by the sizing and spacing mutators.
"""

from __future__ import annotations


def unit_value(value: int, is_percent: bool = False) -> str:
    """Format a number as a CSS length.

    Example:
        >>> unit_value(50), unit_value(50, is_percent=True)
        ('50px', '50%')
    """
    return f"{value}{'%' if is_percent else 'px'}"


def box_shorthand(*values: int) -> str:
    """Build a margin/padding shorthand from 1, 2 or 4 pixel values.

    - 1 value: all sides
    - 2 values: top/bottom, left/right
    - 4 values: top, right, bottom, left

    Raises:
        TypeError: for any other number of values.
    """
    if len(values) not in (1, 2, 4):
        raise TypeError(
            f"box shorthand takes 1, 2 or 4 values ({len(values)} given)"
        )
    return " ".join(unit_value(value) for value in values)
