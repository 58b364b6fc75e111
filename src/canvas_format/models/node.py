"""Canvas nodes: four variants sharing a positional base."""

from dataclasses import dataclass, replace
from typing import ClassVar

from canvas_format.models.primitives import Color, Identifier, Position
from canvas_format.protocols import IdGeneratorProtocol


@dataclass(frozen=True)
class NodeBase:
    """Fields every node variant carries."""

    id: Identifier
    position: Position
    width: int
    height: int
    color: Color | None = None


@dataclass(frozen=True)
class FileNode:
    """A reference to a file in the vault, optionally to a heading or block in it."""

    TYPE: ClassVar[str] = "file"

    base: NodeBase
    file: str
    subpath: str | None = None

    def __post_init__(self) -> None:
        if self.subpath is not None and not self.subpath.startswith("#"):
            msg = f"subpath must start with '#', got {self.subpath!r}"
            raise ValueError(msg)


@dataclass(frozen=True)
class TextNode:
    """Raw markdown text."""

    TYPE: ClassVar[str] = "text"

    base: NodeBase
    text: str


@dataclass(frozen=True)
class LinkNode:
    """An external URL."""

    TYPE: ClassVar[str] = "link"

    base: NodeBase
    url: str


@dataclass(frozen=True)
class GroupNode:
    """A labelled container drawn behind other nodes."""

    TYPE: ClassVar[str] = "group"

    base: NodeBase
    label: str | None = None


Node = FileNode | TextNode | LinkNode | GroupNode

NODE_TYPES: tuple[str, ...] = tuple(
    cls.TYPE for cls in (FileNode, TextNode, LinkNode, GroupNode)
)


def node_base(node: Node) -> NodeBase:
    """Project any node variant down to its shared base."""
    return node.base


def _new_base(
    id_generator: IdGeneratorProtocol,
    position: Position,
    width: int,
    height: int,
    color: Color | None,
) -> NodeBase:
    return NodeBase(
        id=id_generator.next_id(),
        position=position,
        width=width,
        height=height,
        color=color,
    )


def make_file_node(
    *,
    file: str,
    position: Position,
    width: int,
    height: int,
    id_generator: IdGeneratorProtocol,
    subpath: str | None = None,
    color: Color | None = None,
) -> FileNode:
    base = _new_base(id_generator, position, width, height, color)
    return FileNode(base=base, file=file, subpath=subpath)


def make_text_node(
    *,
    text: str,
    position: Position,
    width: int,
    height: int,
    id_generator: IdGeneratorProtocol,
    color: Color | None = None,
) -> TextNode:
    base = _new_base(id_generator, position, width, height, color)
    return TextNode(base=base, text=text)


def make_link_node(
    *,
    url: str,
    position: Position,
    width: int,
    height: int,
    id_generator: IdGeneratorProtocol,
    color: Color | None = None,
) -> LinkNode:
    base = _new_base(id_generator, position, width, height, color)
    return LinkNode(base=base, url=url)


def make_group_node(
    *,
    position: Position,
    width: int,
    height: int,
    id_generator: IdGeneratorProtocol,
    label: str | None = None,
    color: Color | None = None,
) -> GroupNode:
    base = _new_base(id_generator, position, width, height, color)
    return GroupNode(base=base, label=label)


# Conversions keep id, position, size and color; the old payload is dropped.


def convert_to_file(node: Node, *, file: str, subpath: str | None = None) -> FileNode:
    return FileNode(base=node_base(node), file=file, subpath=subpath)


def convert_to_text(node: Node, *, text: str) -> TextNode:
    return TextNode(base=node_base(node), text=text)


def convert_to_link(node: Node, *, url: str) -> LinkNode:
    return LinkNode(base=node_base(node), url=url)


def convert_to_group(node: Node, *, label: str | None = None) -> GroupNode:
    return GroupNode(base=node_base(node), label=label)


def with_position(node: Node, position: Position) -> Node:
    return replace(node, base=replace(node.base, position=position))


def with_size(node: Node, width: int, height: int) -> Node:
    return replace(node, base=replace(node.base, width=width, height=height))


def with_color(node: Node, color: Color | None) -> Node:
    return replace(node, base=replace(node.base, color=color))
