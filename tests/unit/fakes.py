"""Fake implementations for testing canvas builders."""

from canvas_format.models.primitives import Identifier


class FakeIdGenerator:
    """Hands out a predefined list of ids and counts how many were taken."""

    def __init__(self, *values: int) -> None:
        self._values = list(values)
        self.calls = 0

    def next_id(self) -> Identifier:
        """Return the next predefined id."""
        if self.calls >= len(self._values):
            msg = f"FakeIdGenerator: only {len(self._values)} ids registered"
            raise IndexError(msg)
        value = self._values[self.calls]
        self.calls += 1
        return Identifier(value)
