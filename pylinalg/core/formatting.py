"""
Fixed-point display formatting shared by Vector and Matrix.

A displayed row looks like ``[  1.000 -2.500 ]``: an opening bracket,
one space, the values rendered ``%{width}.{precision}f`` and joined by
single spaces, one space, a closing bracket.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class DisplayFormat:
    """Field width and decimal places for displayed values."""
    width: int = 6
    precision: int = 3

    def __post_init__(self) -> None:
        if self.width < 0 or self.precision < 0:
            raise ValueError(
                f"width and precision must be non-negative, got "
                f"width={self.width}, precision={self.precision}"
            )

    def format_value(self, value: float) -> str:
        return f"{value:{self.width}.{self.precision}f}"


DEFAULT_FORMAT = DisplayFormat()


def format_values(values: Iterable[float], fmt: DisplayFormat = DEFAULT_FORMAT) -> str:
    """Render one bracketed line of values."""
    body = " ".join(fmt.format_value(float(v)) for v in values)
    return f"[ {body} ]"


def format_rows(rows: Iterable[Iterable[float]], fmt: DisplayFormat = DEFAULT_FORMAT) -> str:
    """Render one bracketed line per row, joined by newlines."""
    return "\n".join(format_values(row, fmt) for row in rows)
