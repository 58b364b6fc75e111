"""Identifier allocation strategies."""

import random

from canvas_format.config import RANDOM_ID_BITS
from canvas_format.models.canvas import Canvas
from canvas_format.models.primitives import Identifier


class CounterIdGenerator:
    """Hand out consecutive ids starting at ``start``."""

    def __init__(self, start: int = 1) -> None:
        if start < 0:
            msg = f"start must be non-negative, got {start!r}"
            raise ValueError(msg)
        self._next = start

    @classmethod
    def after(cls, canvas: Canvas) -> "CounterIdGenerator":
        """Create a generator whose ids are larger than every id in ``canvas``."""
        used = [n.base.id.value for n in canvas.nodes] + [e.id.value for e in canvas.edges]
        return cls(max(used, default=0) + 1)

    def next_id(self) -> Identifier:
        result = Identifier(self._next)
        self._next += 1
        return result


class RandomIdGenerator:
    """Hand out random fixed-size ids, never repeating one it already issued.

    Ids already present in a document can be reserved with ``reserve`` so they
    are not handed out either.
    """

    def __init__(self, *, bits: int = RANDOM_ID_BITS, rng: random.Random | None = None) -> None:
        if bits <= 0:
            msg = f"bits must be positive, got {bits!r}"
            raise ValueError(msg)
        self.bits = bits
        self._rng = rng or random.SystemRandom()
        self._digits = -(-bits // 4)
        self._issued: set[int] = set()

    def reserve(self, canvas: Canvas) -> None:
        """Mark the ids used in ``canvas`` as taken; ids wider than ``bits`` never collide."""
        limit = 2**self.bits
        used = [n.base.id.value for n in canvas.nodes] + [e.id.value for e in canvas.edges]
        self._issued.update(v for v in used if v < limit)

    def next_id(self) -> Identifier:
        if len(self._issued) >= 2**self.bits:
            msg = f"All {2**self.bits} ids of {self.bits} bits are in use"
            raise RuntimeError(msg)
        while True:
            value = self._rng.getrandbits(self.bits)
            if value not in self._issued:
                self._issued.add(value)
                return Identifier(value, self._digits)
