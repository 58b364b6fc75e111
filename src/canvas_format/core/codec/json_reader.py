"""Decode parsed canvas JSON into domain models.

Every function takes an already-parsed JSON value plus the JSON path it was
found at, and raises ``DecodeError`` carrying that path on the first problem.
Nothing is defaulted except optional fields, which become ``None``.
"""

from typing import Any

from loguru import logger

from canvas_format.core.validation.integrity import check_integrity
from canvas_format.errors import DecodeError, ParseError
from canvas_format.models.canvas import Canvas
from canvas_format.models.edge import Attachment, Bound, Edge
from canvas_format.models.node import (
    NODE_TYPES,
    FileNode,
    GroupNode,
    LinkNode,
    Node,
    NodeBase,
    TextNode,
)
from canvas_format.models.primitives import Identifier, Position, Side

_MISSING = object()


def _expect_object(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(path, f"expected an object, got {_kind(value)}")
    return value


def _expect_array(value: Any, path: str) -> list[Any]:
    if not isinstance(value, list):
        raise DecodeError(path, f"expected an array, got {_kind(value)}")
    return value


def _kind(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _required(data: dict[str, Any], key: str, path: str) -> Any:
    value = data.get(key, _MISSING)
    if value is _MISSING:
        raise DecodeError(path, f"missing required field {key!r}")
    return value


def _required_int(data: dict[str, Any], key: str, path: str) -> int:
    value = _required(data, key, path)
    # bool is an int subclass; JSON true/false is never a coordinate.
    if not isinstance(value, int) or isinstance(value, bool):
        raise DecodeError(f"{path}.{key}", f"expected an integer, got {_kind(value)}")
    return value


def _required_str(data: dict[str, Any], key: str, path: str) -> str:
    value = _required(data, key, path)
    if not isinstance(value, str):
        raise DecodeError(f"{path}.{key}", f"expected a string, got {_kind(value)}")
    return value


def _optional_str(data: dict[str, Any], key: str, path: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DecodeError(f"{path}.{key}", f"expected a string, got {_kind(value)}")
    return value


def decode_identifier(value: Any, path: str) -> Identifier:
    if not isinstance(value, str):
        raise DecodeError(path, f"expected a hex string, got {_kind(value)}")
    try:
        return Identifier.parse(value)
    except ParseError as e:
        raise DecodeError(path, str(e)) from e


def decode_side(value: Any, path: str) -> Side:
    side = Side.parse(value)
    if side is None:
        raise DecodeError(
            path, f"invalid side {value!r}, expected one of {[s.value for s in Side]!r}"
        )
    return side


def _decode_node_base(data: dict[str, Any], path: str) -> NodeBase:
    return NodeBase(
        id=decode_identifier(_required(data, "id", path), f"{path}.id"),
        position=Position(
            _required_int(data, "x", path),
            _required_int(data, "y", path),
        ),
        width=_required_int(data, "width", path),
        height=_required_int(data, "height", path),
        color=_optional_str(data, "color", path),
    )


def decode_node(data: Any, path: str = "$") -> Node:
    """Decode one node object, dispatching on its ``type`` field.

    Raises:
        DecodeError: If a required field is missing or mistyped, or ``type`` is
            not one of file, text, link or group.
    """
    obj = _expect_object(data, path)
    node_type = _required(obj, "type", path)
    if node_type not in NODE_TYPES:
        raise DecodeError(
            f"{path}.type", f"unknown node type {node_type!r}, expected one of {list(NODE_TYPES)!r}"
        )

    base = _decode_node_base(obj, path)
    if node_type == FileNode.TYPE:
        subpath = _optional_str(obj, "subpath", path)
        if subpath is not None and not subpath.startswith("#"):
            raise DecodeError(f"{path}.subpath", f"subpath must start with '#', got {subpath!r}")
        return FileNode(base=base, file=_required_str(obj, "file", path), subpath=subpath)
    if node_type == TextNode.TYPE:
        return TextNode(base=base, text=_required_str(obj, "text", path))
    if node_type == LinkNode.TYPE:
        return LinkNode(base=base, url=_required_str(obj, "url", path))
    return GroupNode(base=base, label=_optional_str(obj, "label", path))


def decode_edge(data: Any, path: str = "$") -> Edge:
    """Decode one edge object. The result is always bound at both ends."""
    obj = _expect_object(data, path)
    edge_id = decode_identifier(_required(obj, "id", path), f"{path}.id")
    start = Attachment(
        node_id=decode_identifier(_required(obj, "fromNode", path), f"{path}.fromNode"),
        side=decode_side(_required(obj, "fromSide", path), f"{path}.fromSide"),
    )
    end = Attachment(
        node_id=decode_identifier(_required(obj, "toNode", path), f"{path}.toNode"),
        side=decode_side(_required(obj, "toSide", path), f"{path}.toSide"),
    )
    return Edge(
        id=edge_id,
        attachments=Bound(start, end),
        color=_optional_str(obj, "color", path),
        label=_optional_str(obj, "label", path),
    )


def decode_canvas(data: Any, *, strict: bool = False) -> Canvas:
    """Decode a whole canvas document.

    Args:
        data: Parsed JSON, normally the result of ``json.loads``.
        strict: Also reject duplicate ids and edges whose endpoints name no
            node (raises ``IntegrityError``).

    Returns:
        The canvas, with nodes and edges in document order.

    Raises:
        DecodeError: On the first malformed element; no partial canvas is built.
    """
    obj = _expect_object(data, "$")
    raw_nodes = _expect_array(_required(obj, "nodes", "$"), "$.nodes")
    raw_edges = _expect_array(_required(obj, "edges", "$"), "$.edges")

    nodes = tuple(decode_node(n, f"$.nodes[{i}]") for i, n in enumerate(raw_nodes))
    edges = tuple(decode_edge(e, f"$.edges[{i}]") for i, e in enumerate(raw_edges))
    canvas = Canvas(nodes=nodes, edges=edges)

    if strict:
        check_integrity(canvas)

    logger.debug("Decoded canvas: {} nodes, {} edges", len(nodes), len(edges))
    return canvas
