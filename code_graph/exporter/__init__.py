"""Graph exporters."""

from __future__ import annotations

from code_graph.exporter.json_exporter import export_graph, graph_document

__all__ = ["export_graph", "graph_document"]
