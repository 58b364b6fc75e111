"""Edges and the attachment state of their two ends.

An edge is normally ``Bound``: both ends touch a node side. While the user
drags one end around, that end is replaced by a free position
(``FloatingStart`` / ``FloatingEnd``) and the other end keeps its attachment.
Only ``Bound`` edges can be written to JSON.
"""

from dataclasses import dataclass, replace

from canvas_format.errors import AttachmentStateError
from canvas_format.models.primitives import Color, Identifier, Position, Side
from canvas_format.protocols import IdGeneratorProtocol


@dataclass(frozen=True)
class Attachment:
    """Where an edge end touches a node."""

    node_id: Identifier
    side: Side


@dataclass(frozen=True)
class Bound:
    from_attachment: Attachment
    to_attachment: Attachment


@dataclass(frozen=True)
class FloatingStart:
    start_position: Position
    to_attachment: Attachment


@dataclass(frozen=True)
class FloatingEnd:
    from_attachment: Attachment
    end_position: Position


Attachments = Bound | FloatingStart | FloatingEnd


def bound_ends(attachments: Attachments) -> tuple[Attachment, ...]:
    """Return the attachments of whichever ends are bound, start first."""
    if isinstance(attachments, Bound):
        return (attachments.from_attachment, attachments.to_attachment)
    if isinstance(attachments, FloatingStart):
        return (attachments.to_attachment,)
    return (attachments.from_attachment,)


@dataclass(frozen=True)
class Edge:
    """A directed connection between two node sides.

    The id is fixed at construction. All ``with_*``, ``attach_*`` and
    ``detach_*`` methods return a new edge.
    """

    id: Identifier
    attachments: Attachments
    color: Color | None = None
    label: str | None = None

    @property
    def is_bound(self) -> bool:
        return isinstance(self.attachments, Bound)

    def bound(self) -> Bound:
        """Return the attachments, which must be ``Bound``.

        Raises:
            AttachmentStateError: If one end is floating.
        """
        if not isinstance(self.attachments, Bound):
            msg = f"edge {self.id} has a floating end ({type(self.attachments).__name__})"
            raise AttachmentStateError(msg)
        return self.attachments

    @property
    def from_node(self) -> Identifier:
        return self.bound().from_attachment.node_id

    @property
    def from_side(self) -> Side:
        return self.bound().from_attachment.side

    @property
    def to_node(self) -> Identifier:
        return self.bound().to_attachment.node_id

    @property
    def to_side(self) -> Side:
        return self.bound().to_attachment.side

    def with_attachments(self, attachments: Attachments) -> "Edge":
        return replace(self, attachments=attachments)

    def with_color(self, color: Color | None) -> "Edge":
        return replace(self, color=color)

    def with_label(self, label: str | None) -> "Edge":
        return replace(self, label=label)

    def detach_start(self, position: Position) -> "Edge":
        """Let the start end float at ``position``, keeping the end attachment."""
        att = self.attachments
        if isinstance(att, Bound):
            return self.with_attachments(FloatingStart(position, att.to_attachment))
        if isinstance(att, FloatingStart):
            return self.with_attachments(FloatingStart(position, att.to_attachment))
        msg = f"edge {self.id}: cannot detach start while the end is floating"
        raise AttachmentStateError(msg)

    def detach_end(self, position: Position) -> "Edge":
        """Let the end float at ``position``, keeping the start attachment."""
        att = self.attachments
        if isinstance(att, Bound):
            return self.with_attachments(FloatingEnd(att.from_attachment, position))
        if isinstance(att, FloatingEnd):
            return self.with_attachments(FloatingEnd(att.from_attachment, position))
        msg = f"edge {self.id}: cannot detach end while the start is floating"
        raise AttachmentStateError(msg)

    def attach_start(self, attachment: Attachment) -> "Edge":
        """Bind the start end to ``attachment``."""
        att = self.attachments
        if isinstance(att, FloatingEnd):
            return self.with_attachments(FloatingEnd(attachment, att.end_position))
        return self.with_attachments(Bound(attachment, att.to_attachment))

    def attach_end(self, attachment: Attachment) -> "Edge":
        """Bind the end to ``attachment``."""
        att = self.attachments
        if isinstance(att, FloatingStart):
            return self.with_attachments(FloatingStart(att.start_position, attachment))
        return self.with_attachments(Bound(att.from_attachment, attachment))


def make_edge(
    from_node: Identifier,
    from_side: Side,
    to_node: Identifier,
    to_side: Side,
    *,
    id_generator: IdGeneratorProtocol,
    color: Color | None = None,
    label: str | None = None,
) -> Edge:
    """Create a bound edge between two node sides with a freshly allocated id."""
    return Edge(
        id=id_generator.next_id(),
        attachments=Bound(Attachment(from_node, from_side), Attachment(to_node, to_side)),
        color=color,
        label=label,
    )
