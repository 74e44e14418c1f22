"""JSON exports of a resolved ontology graph.

These dumps exist for inspection and debugging; their layout is not a
stable contract.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

import networkx as nx

from schemagen.graph.manager import OntologyGraph

logger = logging.getLogger("schemagen.export.json")


def resolved_document(graph: OntologyGraph) -> Dict[str, Any]:
    """Build the resolved document: ``@context`` plus nodes with ``Childs``."""
    return {
        "@context": graph.context,
        "@graph": [node.to_jsonld(include_childs=True) for node in graph.nodes],
    }


def export_resolved_graph(graph: OntologyGraph, output_path: Path) -> None:
    """Write the resolved document as indented JSON.

    Args:
        graph: Resolved graph.
        output_path: Output file path.
    """
    logger.info("Exporting resolved graph to JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(resolved_document(graph), f, indent="\t", ensure_ascii=False)

    logger.info("JSON export completed: %d nodes", len(graph.nodes))


def export_node_link(graph: OntologyGraph, output_path: Path) -> None:
    """Write the child relation graph in networkx node-link form."""
    logger.info("Exporting child graph to node-link JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    native = graph.to_networkx()
    data = nx.readwrite.json_graph.node_link_data(native, edges="edges")

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info(
        "Node-link export completed: %d nodes, %d edges",
        native.number_of_nodes(),
        native.number_of_edges(),
    )
