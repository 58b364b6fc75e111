"""Encode domain models into JSON-ready dicts.

Key order follows the file format: shared node fields first, then variant
fields. Absent optional fields are left out rather than written as null.
"""

from typing import Any

from loguru import logger

from canvas_format.errors import EdgeEncodeError, IncompleteAttachmentError
from canvas_format.models.canvas import Canvas
from canvas_format.models.edge import Bound, Edge
from canvas_format.models.node import FileNode, GroupNode, LinkNode, Node, TextNode


def encode_node(node: Node) -> dict[str, Any]:
    base = node.base
    out: dict[str, Any] = {
        "id": base.id.render(),
        "type": node.TYPE,
        "x": base.position.x,
        "y": base.position.y,
        "width": base.width,
        "height": base.height,
    }
    if base.color is not None:
        out["color"] = base.color

    if isinstance(node, FileNode):
        out["file"] = node.file
        if node.subpath is not None:
            out["subpath"] = node.subpath
    elif isinstance(node, TextNode):
        out["text"] = node.text
    elif isinstance(node, LinkNode):
        out["url"] = node.url
    elif isinstance(node, GroupNode):
        if node.label is not None:
            out["label"] = node.label
    return out


def encode_edge(edge: Edge) -> dict[str, Any]:
    """Encode a bound edge.

    Raises:
        IncompleteAttachmentError: If either end of the edge is floating.
    """
    att = edge.attachments
    if not isinstance(att, Bound):
        raise IncompleteAttachmentError(edge.id, att)

    out: dict[str, Any] = {
        "id": edge.id.render(),
        "fromNode": att.from_attachment.node_id.render(),
        "fromSide": att.from_attachment.side.render(),
        "toNode": att.to_attachment.node_id.render(),
        "toSide": att.to_attachment.side.render(),
    }
    if edge.color is not None:
        out["color"] = edge.color
    if edge.label is not None:
        out["label"] = edge.label
    return out


def encode_canvas(canvas: Canvas) -> dict[str, Any]:
    """Encode a canvas document.

    Raises:
        EdgeEncodeError: For the first edge that is not bound at both ends. The
            underlying ``IncompleteAttachmentError`` is chained as the cause.
    """
    nodes = [encode_node(n) for n in canvas.nodes]

    edges: list[dict[str, Any]] = []
    for i, edge in enumerate(canvas.edges):
        try:
            edges.append(encode_edge(edge))
        except IncompleteAttachmentError as e:
            raise EdgeEncodeError(edge.id, i) from e

    logger.debug("Encoded canvas: {} nodes, {} edges", len(nodes), len(edges))
    return {"nodes": nodes, "edges": edges}
