"""The canvas document: ordered nodes and edges."""

from dataclasses import dataclass, replace

from canvas_format.models.edge import Edge, bound_ends
from canvas_format.models.node import Node
from canvas_format.models.primitives import Identifier


@dataclass(frozen=True)
class Canvas:
    """A canvas document.

    Order of ``nodes`` and ``edges`` is the order of the source document and
    survives a decode/encode round trip; it has no other meaning. Editing
    methods return a new canvas.

    Edges refer to nodes by id only. Nothing here checks that those ids exist
    or are unique; see ``canvas_format.core.validation.integrity``.
    """

    nodes: tuple[Node, ...] = ()
    edges: tuple[Edge, ...] = ()

    def get_node(self, node_id: Identifier) -> Node:
        for node in self.nodes:
            if node.base.id == node_id:
                return node
        msg = f"No node with id {node_id}"
        raise KeyError(msg)

    def get_edge(self, edge_id: Identifier) -> Edge:
        for edge in self.edges:
            if edge.id == edge_id:
                return edge
        msg = f"No edge with id {edge_id}"
        raise KeyError(msg)

    def edges_for(self, node_id: Identifier) -> tuple[Edge, ...]:
        """Return the edges with at least one end bound to ``node_id``."""
        return tuple(e for e in self.edges if node_id in _bound_node_ids(e))

    def add_node(self, node: Node) -> "Canvas":
        return replace(self, nodes=(*self.nodes, node))

    def add_edge(self, edge: Edge) -> "Canvas":
        return replace(self, edges=(*self.edges, edge))

    def replace_node(self, node: Node) -> "Canvas":
        """Swap in ``node`` for the existing node with the same id, keeping its place."""
        self.get_node(node.base.id)
        return replace(
            self,
            nodes=tuple(node if n.base.id == node.base.id else n for n in self.nodes),
        )

    def replace_edge(self, edge: Edge) -> "Canvas":
        """Swap in ``edge`` for the existing edge with the same id, keeping its place."""
        self.get_edge(edge.id)
        return replace(self, edges=tuple(edge if e.id == edge.id else e for e in self.edges))

    def remove_node(self, node_id: Identifier, *, cascade: bool = False) -> "Canvas":
        """Remove a node.

        Args:
            node_id: Id of the node to remove.
            cascade: Also remove edges attached to the node. Without it, such
                edges are kept and left dangling.
        """
        self.get_node(node_id)
        edges = self.edges
        if cascade:
            edges = tuple(e for e in edges if node_id not in _bound_node_ids(e))
        return replace(
            self,
            nodes=tuple(n for n in self.nodes if n.base.id != node_id),
            edges=edges,
        )

    def remove_edge(self, edge_id: Identifier) -> "Canvas":
        self.get_edge(edge_id)
        return replace(self, edges=tuple(e for e in self.edges if e.id != edge_id))


def _bound_node_ids(edge: Edge) -> set[Identifier]:
    return {a.node_id for a in bound_ends(edge.attachments)}
