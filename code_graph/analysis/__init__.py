"""Graph assembly and cycle analysis."""

from __future__ import annotations

from code_graph.analysis.cycles import cycle_edges, detect_cycles
from code_graph.analysis.dependency_graph import DependencyGraphBuilder, node_id_for
from code_graph.analysis.graph_models import GraphData, GraphEdge, GraphNode, GraphSummary

__all__ = [
    "DependencyGraphBuilder",
    "GraphData",
    "GraphEdge",
    "GraphNode",
    "GraphSummary",
    "cycle_edges",
    "detect_cycles",
    "node_id_for",
]
