"""Primitive values shared by nodes and edges."""

import re
from dataclasses import dataclass, replace
from enum import Enum

from canvas_format.errors import ParseError

_HEX_RE = re.compile(r"[0-9A-Fa-f]+")

# Optional opaque color descriptor ("1".."6" presets or "#rrggbb"); never interpreted here.
Color = str


@dataclass(frozen=True, order=True)
class Identifier:
    """Unique token for a node or edge, written as a lowercase hex string.

    ``digits`` is the written width; ids read with leading zeros keep them, and
    ``"0f"`` and ``"f"`` are different ids. It is never less than the minimal
    width of ``value``.
    """

    value: int
    digits: int = 0

    def __post_init__(self) -> None:
        if self.value < 0:
            msg = f"Identifier must be non-negative, got {self.value!r}"
            raise ValueError(msg)
        minimal = len(format(self.value, "x"))
        if self.digits < minimal:
            object.__setattr__(self, "digits", minimal)

    @classmethod
    def from_int(cls, value: int, *, digits: int = 0) -> "Identifier":
        return cls(value, digits)

    @classmethod
    def parse(cls, text: str) -> "Identifier":
        """Parse a hex string (any case, no prefix, no sign).

        Raises:
            ParseError: If ``text`` is empty or contains a non-hex character.
        """
        # int(text, 16) alone would accept "0x1f", "+1f", " 1f" and "1_f".
        if not isinstance(text, str) or _HEX_RE.fullmatch(text) is None:
            raise ParseError("identifier", str(text))
        return cls(int(text, 16), len(text))

    def render(self) -> str:
        return format(self.value, f"0{self.digits}x")

    def __str__(self) -> str:
        return self.render()


class Side(Enum):
    """Edge attachment point on a node's bounding box."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @classmethod
    def parse(cls, text: str) -> "Side | None":
        """Return the side named by ``text``, or None for anything else."""
        for side in cls:
            if side.value == text:
                return side
        return None

    def render(self) -> str:
        return self.value


@dataclass(frozen=True)
class Position:
    """Integer canvas coordinate."""

    x: int
    y: int

    def with_coordinates(self, x: int, y: int) -> "Position":
        return replace(self, x=x, y=y)
