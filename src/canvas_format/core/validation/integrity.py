"""Referential integrity checks for decoded canvases."""

from canvas_format.errors import IntegrityError
from canvas_format.models.canvas import Canvas
from canvas_format.models.edge import Bound, FloatingEnd, FloatingStart
from canvas_format.models.primitives import Identifier


def find_integrity_problems(canvas: Canvas) -> list[IntegrityError]:
    """Collect every id problem in a canvas, in document order.

    Reported problems: a node id used twice, an edge id used twice, an edge id
    equal to a node id, and a bound edge end naming a node that does not exist.
    Floating ends are not checked.
    """
    problems: list[IntegrityError] = []

    node_ids: dict[Identifier, int] = {}
    for i, node in enumerate(canvas.nodes):
        node_id = node.base.id
        if node_id in node_ids:
            problems.append(
                IntegrityError(
                    f"$.nodes[{i}].id",
                    f"duplicate node id {node_id} (first used by nodes[{node_ids[node_id]}])",
                )
            )
        else:
            node_ids[node_id] = i

    edge_ids: dict[Identifier, int] = {}
    for i, edge in enumerate(canvas.edges):
        path = f"$.edges[{i}]"
        if edge.id in edge_ids:
            problems.append(
                IntegrityError(
                    f"{path}.id",
                    f"duplicate edge id {edge.id} (first used by edges[{edge_ids[edge.id]}])",
                )
            )
        else:
            edge_ids[edge.id] = i
        if edge.id in node_ids:
            problems.append(
                IntegrityError(f"{path}.id", f"edge id {edge.id} is also a node id")
            )

        att = edge.attachments
        ends: list[tuple[str, Identifier]] = []
        if isinstance(att, (Bound, FloatingEnd)):
            ends.append(("fromNode", att.from_attachment.node_id))
        if isinstance(att, (Bound, FloatingStart)):
            ends.append(("toNode", att.to_attachment.node_id))
        for field, node_id in ends:
            if node_id not in node_ids:
                problems.append(
                    IntegrityError(f"{path}.{field}", f"edge refers to missing node {node_id}")
                )

    return problems


def check_integrity(canvas: Canvas) -> None:
    """Raise the first problem ``find_integrity_problems`` reports, if any.

    Raises:
        IntegrityError: If any id is duplicated or dangling.
    """
    problems = find_integrity_problems(canvas)
    if problems:
        raise problems[0]
