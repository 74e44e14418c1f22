"""Relation resolution.

Turns the raw relation references of every node into the node's
``childs`` list, i.e. the identifiers that become fields of its generated
declaration. Resolution runs in two phases separated by a global barrier:

1. Direct relations, one walk over the node list:
   - ``rdfs:subPropertyOf`` / ``schema:domainIncludes``: the node is
     attached as a child of each target (a property belongs to the types in
     its domain and to its super-property).
   - ``schema:rangeIncludes``: each target is attached as a child of the
     node itself.
2. Inheritance (``rdfs:subClassOf``): every node copies the children of its
   superclasses. Superclasses are visited before their subclasses, so
   children propagate down whole chains; members of a subclass cycle are
   visited in document order and simply copy what is already there.

References to identifiers that are not in the graph are expected (the
vocabulary links to external ones) and contribute nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import networkx as nx

from schemagen.graph.manager import OntologyGraph
from schemagen.graph.models import GraphNode
from schemagen.jsonld.values import IdRef

logger = logging.getLogger("schemagen.graph.resolver")


@dataclass
class ResolutionStats:
    """Counters collected while resolving a graph."""

    members_attached: int = 0
    ranges_attached: int = 0
    inherited: int = 0
    dangling: int = 0
    superseded_skipped: int = 0

    @property
    def total_children(self) -> int:
        return self.members_attached + self.ranges_attached + self.inherited


class RelationResolver:
    """Populate ``childs`` for every node of an :class:`OntologyGraph`."""

    def __init__(self, graph: OntologyGraph, exclude_superseded: bool = False) -> None:
        """Initialize resolver.

        Args:
            graph: Graph to resolve in place.
            exclude_superseded: Do not attach nodes that carry
                ``schema:supersededBy`` to their domain or super-property.
        """
        self.graph = graph
        self.exclude_superseded = exclude_superseded
        self.stats = ResolutionStats()

    def resolve(self) -> ResolutionStats:
        """Run both phases over the whole graph.

        Raises:
            InvalidReferenceShape: If any relation value cannot be decoded.
        """
        self.resolve_direct()
        self.resolve_inheritance()
        logger.info(
            "Resolution completed: %d members, %d ranges, %d inherited, %d dangling",
            self.stats.members_attached,
            self.stats.ranges_attached,
            self.stats.inherited,
            self.stats.dangling,
        )
        return self.stats

    def resolve_direct(self) -> None:
        """Phase one: sub-property, domain and range relations."""
        for node in self.graph.nodes:
            self._attach_to_targets(node, node.sub_property_of, "rdfs:subPropertyOf")
            self._attach_to_targets(node, node.domain_includes, "schema:domainIncludes")
            self._attach_ranges(node)

    def resolve_inheritance(self) -> None:
        """Phase two: copy superclass children into each subclass.

        Must only run once :meth:`resolve_direct` has finished for the
        whole graph.
        """
        for node in self._inheritance_order():
            for target in self._known_targets(node, node.sub_class_of, "rdfs:subClassOf"):
                for child in list(target.childs):
                    if node.add_child(child):
                        self.stats.inherited += 1

    def _known_targets(
        self, node: GraphNode, ref: Optional[IdRef], relation: str
    ) -> List[GraphNode]:
        if ref is None:
            return []
        targets: List[GraphNode] = []
        for target_id in ref.get_ids():
            target = self.graph.get(target_id)
            if target is None:
                self.stats.dangling += 1
                logger.debug("Skipping dangling %s %s -> %s", relation, node.id, target_id)
                continue
            targets.append(target)
        return targets

    def _attach_to_targets(
        self, node: GraphNode, ref: Optional[IdRef], relation: str
    ) -> None:
        if ref is None:
            return
        if self.exclude_superseded and node.is_superseded:
            self.stats.superseded_skipped += 1
            logger.debug("Not attaching superseded %s via %s", node.id, relation)
            return
        for target in self._known_targets(node, ref, relation):
            if target.add_child(node.id):
                self.stats.members_attached += 1

    def _attach_ranges(self, node: GraphNode) -> None:
        for target in self._known_targets(node, node.range_includes, "schema:rangeIncludes"):
            if node.add_child(target.id):
                self.stats.ranges_attached += 1

    def _inheritance_order(self) -> List[GraphNode]:
        """Order nodes so that superclasses come before their subclasses."""
        nodes = self.graph.nodes
        hierarchy = nx.DiGraph()
        hierarchy.add_nodes_from(range(len(nodes)))
        for position, node in enumerate(nodes):
            if node.sub_class_of is None:
                continue
            for target_id in node.sub_class_of.get_ids():
                target_position = self.graph.position(target_id)
                if target_position is not None:
                    hierarchy.add_edge(target_position, position)

        condensed = nx.condensation(hierarchy)
        order: List[int] = []
        for component in nx.lexicographical_topological_sort(
            condensed, key=lambda c: min(condensed.nodes[c]["members"])
        ):
            order.extend(sorted(condensed.nodes[component]["members"]))
        return [nodes[position] for position in order]


def resolve_graph(graph: OntologyGraph, exclude_superseded: bool = False) -> ResolutionStats:
    """Resolve ``graph`` in place and return the collected counters."""
    return RelationResolver(graph, exclude_superseded=exclude_superseded).resolve()


__all__ = ["RelationResolver", "ResolutionStats", "resolve_graph"]
