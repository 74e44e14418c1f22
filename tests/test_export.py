"""Tests for resolved graph JSON exports."""

from __future__ import annotations

import json
from pathlib import Path

from schemagen.export import export_node_link, export_resolved_graph
from schemagen.export.json import resolved_document
from schemagen.graph import GraphNode, OntologyGraph, resolve_graph


def _graph() -> OntologyGraph:
    graph = OntologyGraph(
        [
            GraphNode.model_validate({"@id": "schema:Person", "@type": "rdfs:Class"}),
            GraphNode.model_validate(
                {
                    "@id": "schema:name",
                    "@type": "rdf:Property",
                    "schema:domainIncludes": {"@id": "schema:Person"},
                }
            ),
        ],
        context={"schema": "https://schema.org/"},
    )
    resolve_graph(graph)
    return graph


def test_resolved_document_carries_context_and_childs() -> None:
    document = resolved_document(_graph())

    assert document["@context"] == {"schema": "https://schema.org/"}
    person, name = document["@graph"]
    assert person["@id"] == "schema:Person"
    assert person["Childs"] == ["schema:name"]
    assert name["Childs"] == []
    assert name["schema:domainIncludes"] == {"@id": "schema:Person"}


def test_export_resolved_graph_writes_tab_indented_json(tmp_path: Path) -> None:
    output = tmp_path / "nested" / "resolved.json"

    export_resolved_graph(_graph(), output)

    text = output.read_text(encoding="utf-8")
    assert '\n\t"@graph"' in text
    assert json.loads(text)["@graph"][0]["Childs"] == ["schema:name"]


def test_export_node_link_writes_child_edges(tmp_path: Path) -> None:
    output = tmp_path / "graph.json"

    export_node_link(_graph(), output)

    data = json.loads(output.read_text(encoding="utf-8"))
    assert {node["id"] for node in data["nodes"]} == {"schema:Person", "schema:name"}
    assert [(e["source"], e["target"]) for e in data["edges"]] == [
        ("schema:Person", "schema:name")
    ]
