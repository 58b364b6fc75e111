"""Typed model and JSON codec for whiteboard canvas files."""

from canvas_format.core.codec.json_reader import decode_canvas, decode_edge, decode_node
from canvas_format.core.codec.json_writer import encode_canvas, encode_edge, encode_node
from canvas_format.core.storage import dumps, load, loads, save
from canvas_format.core.validation.integrity import check_integrity, find_integrity_problems
from canvas_format.errors import (
    AttachmentStateError,
    CanvasFormatError,
    DecodeError,
    EdgeEncodeError,
    EncodeError,
    IncompleteAttachmentError,
    IntegrityError,
    ParseError,
)
from canvas_format.ids import CounterIdGenerator, RandomIdGenerator
from canvas_format.models.canvas import Canvas
from canvas_format.models.edge import Attachment, Bound, Edge, FloatingEnd, FloatingStart
from canvas_format.models.node import FileNode, GroupNode, LinkNode, NodeBase, TextNode
from canvas_format.models.primitives import Identifier, Position, Side
from canvas_format.protocols import IdGeneratorProtocol

__all__ = [
    "Attachment",
    "AttachmentStateError",
    "Bound",
    "Canvas",
    "CanvasFormatError",
    "CounterIdGenerator",
    "DecodeError",
    "Edge",
    "EdgeEncodeError",
    "EncodeError",
    "FileNode",
    "FloatingEnd",
    "FloatingStart",
    "GroupNode",
    "IdGeneratorProtocol",
    "Identifier",
    "IncompleteAttachmentError",
    "IntegrityError",
    "LinkNode",
    "NodeBase",
    "ParseError",
    "Position",
    "RandomIdGenerator",
    "Side",
    "TextNode",
    "check_integrity",
    "decode_canvas",
    "decode_edge",
    "decode_node",
    "dumps",
    "encode_canvas",
    "encode_edge",
    "encode_node",
    "find_integrity_problems",
    "load",
    "loads",
    "save",
]
