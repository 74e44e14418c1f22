"""Ontology graph container.

OntologyGraph owns the flat node collection of one document together
with an identifier index built once at construction. Nodes never point
back at the graph; operations that need to look other nodes up take the
graph as a parameter.
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

import networkx as nx

from schemagen.errors import DuplicateNodeError
from schemagen.graph.models import GraphNode, OntologyDocument
from schemagen.jsonld.values import NodeID

logger = logging.getLogger("schemagen.graph.manager")


class OntologyGraph:
    """Arena of graph nodes plus an identifier -> position index."""

    def __init__(
        self,
        nodes: List[GraphNode],
        context: Optional[Dict[str, Any]] = None,
        strict_duplicates: bool = False,
    ) -> None:
        """Build the graph and its index.

        Args:
            nodes: Nodes in document order.
            context: ``@context`` mapping, passed through untouched.
            strict_duplicates: Raise on a repeated ``@id`` instead of
                letting the last occurrence win.

        Raises:
            DuplicateNodeError: On a repeated ``@id`` in strict mode.
        """
        self.context: Dict[str, Any] = dict(context or {})
        self._nodes: List[GraphNode] = list(nodes)
        self._index: Dict[NodeID, int] = {}
        self.duplicates: List[NodeID] = []

        for position, node in enumerate(self._nodes):
            if node.id in self._index:
                if strict_duplicates:
                    raise DuplicateNodeError(node.id)
                first = self.find_def(node.id)
                logger.warning(
                    "Duplicate node %s (%s) at position %d shadows position %d; "
                    "first defined as %s",
                    node.id,
                    node.type.first(),
                    position,
                    self._index[node.id],
                    first.type.first(),
                )
                self.duplicates.append(node.id)
            self._index[node.id] = position

        logger.info(
            "OntologyGraph built: %d nodes, %d unique identifiers",
            len(self._nodes),
            len(self._index),
        )

    @classmethod
    def from_document(
        cls, document: OntologyDocument, strict_duplicates: bool = False
    ) -> "OntologyGraph":
        return cls(
            document.graph,
            context=document.context,
            strict_duplicates=strict_duplicates,
        )

    @property
    def nodes(self) -> List[GraphNode]:
        """All nodes in document order, shadowed duplicates included."""
        return self._nodes

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._index

    def position(self, node_id: NodeID) -> Optional[int]:
        """Return the list position of the indexed node, or None."""
        return self._index.get(node_id)

    def get(self, node_id: NodeID) -> Optional[GraphNode]:
        """Look a node up through the index."""
        position = self._index.get(node_id)
        if position is None:
            return None
        return self._nodes[position]

    def find_def(self, node_id: NodeID) -> Optional[GraphNode]:
        """Return the first node carrying ``node_id`` by scanning the node list.

        Unlike :meth:`get`, this ignores the index and therefore returns the
        first occurrence when the document contains duplicates.
        """
        for node in self._nodes:
            if node.id == node_id:
                return node
        return None

    def unique_nodes(self) -> Iterator[GraphNode]:
        """Yield each indexed node once, in index insertion order."""
        for position in self._index.values():
            yield self._nodes[position]

    def to_networkx(self) -> nx.DiGraph:
        """Project resolved child relations into a directed graph.

        Each indexed node becomes a graph node; each ``childs`` entry that
        names a known node becomes an edge ``parent -> child``.
        """
        graph = nx.DiGraph()
        for node in self.unique_nodes():
            graph.add_node(node.id, type=list(node.type), label=str(node.label))
        for node in self.unique_nodes():
            for child in node.childs:
                if child in self._index:
                    graph.add_edge(node.id, child)
        return graph

    def recursive_groups(self) -> List[List[NodeID]]:
        """Return groups of declarations that reference each other.

        A group is a strongly connected component of the child graph with
        more than one member, or a single node listing itself as a child.
        """
        graph = self.to_networkx()
        groups: List[List[NodeID]] = []
        for component in nx.strongly_connected_components(graph):
            members = sorted(component)
            if len(members) > 1 or graph.has_edge(members[0], members[0]):
                groups.append(members)
        return groups
