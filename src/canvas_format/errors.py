"""Exceptions raised while parsing, decoding and encoding canvas documents."""

from typing import Any


class CanvasFormatError(Exception):
    """Base class for all canvas-format errors."""


class ParseError(CanvasFormatError, ValueError):
    """A primitive (identifier or side) could not be parsed from its string form."""

    def __init__(self, kind: str, raw: str) -> None:
        self.kind = kind
        self.raw = raw
        super().__init__(f"invalid {kind}: {raw!r}")


class DecodeError(CanvasFormatError, ValueError):
    """A JSON value does not have the shape of a canvas, node or edge.

    Attributes:
        path: JSON path of the offending value, e.g. ``$.edges[2].toSide``.
        reason: Human-readable description of what is wrong.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class IntegrityError(DecodeError):
    """A canvas is well-formed but its ids are duplicated or dangling."""


class EncodeError(CanvasFormatError):
    """A model value has no JSON representation."""


class IncompleteAttachmentError(EncodeError):
    """An edge has a floating end and cannot be serialized."""

    def __init__(self, edge_id: Any, attachments: Any) -> None:
        self.edge_id = edge_id
        self.attachments = attachments
        super().__init__(
            f"edge {edge_id} is not bound at both ends ({type(attachments).__name__})"
        )


class EdgeEncodeError(EncodeError):
    """Encoding a canvas failed because one of its edges could not be encoded."""

    def __init__(self, edge_id: Any, index: int) -> None:
        self.edge_id = edge_id
        self.index = index
        super().__init__(
            f"cannot save canvas: edge {edge_id} (edges[{index}]) has an unbound end"
        )


class AttachmentStateError(CanvasFormatError):
    """An edge operation is not valid in the edge's current attachment state.

    Raised for endpoint accessors on a floating edge, and for edits that would
    leave an edge with no bound end at all.
    """
