"""Protocols for dependency injection into node and edge builders."""

from typing import Protocol, runtime_checkable

from canvas_format.models.primitives import Identifier


@runtime_checkable
class IdGeneratorProtocol(Protocol):
    """Protocol for identifier allocation strategies."""

    def next_id(self) -> Identifier:
        """Allocate a fresh identifier."""
        ...
