"""Tests for edges and their attachment state machine."""

import pytest

from canvas_format.errors import AttachmentStateError
from canvas_format.models.edge import (
    Attachment,
    Bound,
    Edge,
    FloatingEnd,
    FloatingStart,
    bound_ends,
    make_edge,
)
from canvas_format.models.primitives import Identifier, Position, Side
from tests.unit.fakes import FakeIdGenerator

A = Attachment(Identifier(0xA), Side.RIGHT)
B = Attachment(Identifier(0xB), Side.LEFT)
C = Attachment(Identifier(0xC), Side.TOP)


def _edge() -> Edge:
    return make_edge(
        Identifier(0xA),
        Side.RIGHT,
        Identifier(0xB),
        Side.LEFT,
        id_generator=FakeIdGenerator(0xE1),
        label="flows to",
    )


def test_make_edge_is_bound() -> None:
    edge = _edge()

    assert edge.id == Identifier(0xE1)
    assert edge.attachments == Bound(A, B)
    assert edge.is_bound
    assert (edge.from_node, edge.from_side) == (Identifier(0xA), Side.RIGHT)
    assert (edge.to_node, edge.to_side) == (Identifier(0xB), Side.LEFT)
    assert edge.color is None
    assert edge.label == "flows to"


def test_detach_start_keeps_the_end_attachment() -> None:
    edge = _edge().detach_start(Position(5, 5))

    assert edge.attachments == FloatingStart(Position(5, 5), B)
    assert not edge.is_bound


def test_detach_end_keeps_the_start_attachment() -> None:
    edge = _edge().detach_end(Position(1, 2))

    assert edge.attachments == FloatingEnd(A, Position(1, 2))


def test_detaching_the_floating_end_again_moves_it() -> None:
    edge = _edge().detach_end(Position(1, 2)).detach_end(Position(3, 4))

    assert edge.attachments == FloatingEnd(A, Position(3, 4))


def test_detaching_both_ends_is_rejected() -> None:
    floating = _edge().detach_start(Position(0, 0))

    with pytest.raises(AttachmentStateError):
        floating.detach_end(Position(1, 1))
    with pytest.raises(AttachmentStateError):
        _edge().detach_end(Position(1, 1)).detach_start(Position(0, 0))


def test_attaching_the_floating_end_binds_the_edge() -> None:
    edge = _edge().detach_start(Position(0, 0)).attach_start(C)

    assert edge.attachments == Bound(C, B)

    edge = _edge().detach_end(Position(0, 0)).attach_end(C)

    assert edge.attachments == Bound(A, C)


def test_attaching_the_bound_end_of_a_floating_edge_keeps_it_floating() -> None:
    edge = _edge().detach_end(Position(9, 9)).attach_start(C)

    assert edge.attachments == FloatingEnd(C, Position(9, 9))


def test_endpoint_accessors_require_bound_edge() -> None:
    edge = _edge().detach_start(Position(0, 0))

    with pytest.raises(AttachmentStateError, match="floating"):
        _ = edge.from_node
    with pytest.raises(AttachmentStateError):
        _ = edge.to_side


def test_setters_return_new_edges_and_keep_id() -> None:
    edge = _edge()

    changed = edge.with_color("3").with_label(None).with_attachments(Bound(B, A))

    assert changed.id == edge.id
    assert changed.color == "3"
    assert changed.label is None
    assert changed.attachments == Bound(B, A)
    assert edge.color is None
    assert edge.label == "flows to"


def test_bound_ends() -> None:
    assert bound_ends(Bound(A, B)) == (A, B)
    assert bound_ends(FloatingStart(Position(0, 0), B)) == (B,)
    assert bound_ends(FloatingEnd(A, Position(0, 0))) == (A,)
