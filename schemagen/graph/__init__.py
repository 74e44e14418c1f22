"""Public graph API surface."""

from schemagen.graph.manager import OntologyGraph
from schemagen.graph.models import GraphNode, OntologyDocument
from schemagen.graph.naming import pascal_case, type_name
from schemagen.graph.resolver import RelationResolver, ResolutionStats, resolve_graph

__all__ = [
    "GraphNode",
    "OntologyDocument",
    "OntologyGraph",
    "RelationResolver",
    "ResolutionStats",
    "pascal_case",
    "resolve_graph",
    "type_name",
]
