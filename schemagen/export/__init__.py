"""Diagnostic exports of the resolved graph."""

from schemagen.export.json import export_node_link, export_resolved_graph

__all__ = ["export_node_link", "export_resolved_graph"]
