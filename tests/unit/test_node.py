"""Tests for node builders, conversions and setters."""

import pytest

from canvas_format.core.codec.json_writer import encode_node
from canvas_format.models.node import (
    FileNode,
    GroupNode,
    LinkNode,
    NodeBase,
    TextNode,
    convert_to_file,
    convert_to_group,
    convert_to_link,
    convert_to_text,
    make_file_node,
    make_group_node,
    make_link_node,
    make_text_node,
    node_base,
    with_color,
    with_position,
    with_size,
)
from canvas_format.models.primitives import Identifier, Position
from tests.unit.fakes import FakeIdGenerator


def _file_node() -> FileNode:
    base = NodeBase(
        id=Identifier(0xF00D), position=Position(10, 20), width=300, height=200, color="2"
    )
    return FileNode(base=base, file="docs/readme.md", subpath="#Intro")


def test_builders_take_ids_from_the_generator() -> None:
    ids = FakeIdGenerator(1, 2, 3, 4)
    pos = Position(0, 0)

    nodes = [
        make_file_node(file="a.md", position=pos, width=1, height=1, id_generator=ids),
        make_text_node(text="hi", position=pos, width=1, height=1, id_generator=ids),
        make_link_node(url="https://x.test", position=pos, width=1, height=1, id_generator=ids),
        make_group_node(position=pos, width=1, height=1, id_generator=ids),
    ]

    assert [n.base.id for n in nodes] == [Identifier(1), Identifier(2), Identifier(3), Identifier(4)]
    assert ids.calls == 4
    assert [n.TYPE for n in nodes] == ["file", "text", "link", "group"]


def test_builder_leaves_optional_fields_absent() -> None:
    node = make_group_node(
        position=Position(1, 2), width=10, height=20, id_generator=FakeIdGenerator(7)
    )

    assert node.label is None
    assert node.base.color is None


def test_file_node_rejects_subpath_without_hash() -> None:
    with pytest.raises(ValueError, match="subpath must start with '#'"):
        make_file_node(
            file="a.md",
            subpath="Heading",
            position=Position(0, 0),
            width=1,
            height=1,
            id_generator=FakeIdGenerator(1),
        )


def test_convert_file_to_group_keeps_base_and_drops_payload() -> None:
    original = _file_node()

    group = convert_to_group(original, label="Research")

    assert isinstance(group, GroupNode)
    assert node_base(group) == node_base(original)
    assert group.label == "Research"
    encoded = encode_node(group)
    assert "file" not in encoded
    assert "subpath" not in encoded
    assert encoded["type"] == "group"


def test_conversions_cover_every_variant() -> None:
    original = _file_node()

    text = convert_to_text(original, text="body")
    link = convert_to_link(text, url="https://example.com")
    back = convert_to_file(link, file="other.md")

    assert isinstance(text, TextNode)
    assert isinstance(link, LinkNode)
    assert isinstance(back, FileNode)
    assert back.subpath is None
    assert back.base == original.base


def test_with_position_touches_only_position() -> None:
    original = _file_node()

    moved = with_position(original, Position(-5, 7))

    assert moved.base.position == Position(-5, 7)
    assert moved.base.id == original.base.id
    assert (moved.base.width, moved.base.height) == (300, 200)
    assert isinstance(moved, FileNode)
    assert (moved.file, moved.subpath) == (original.file, original.subpath)
    assert original.base.position == Position(10, 20)


def test_with_size_and_color() -> None:
    original = _file_node()

    resized = with_size(original, 50, 60)
    uncolored = with_color(resized, None)

    assert (resized.base.width, resized.base.height) == (50, 60)
    assert resized.base.color == "2"
    assert uncolored.base.color is None
    assert uncolored.base.position == original.base.position


def test_nodes_are_frozen() -> None:
    node = _file_node()
    with pytest.raises(AttributeError):
        node.file = "other.md"  # type: ignore[misc]
