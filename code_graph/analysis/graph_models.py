"""Data models for the dependency graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from code_graph.models import DependencyKind, Language

MAX_EDGE_WEIGHT = 5


@dataclass
class GraphNode:
    id: str  # normalized relative path
    label: str
    path: str
    language: Language
    size: int
    line_count: int
    group: int
    dependency_count: int = 0
    dependent_count: int = 0
    is_circular: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "path": self.path,
            "language": self.language.value,
            "size": self.size,
            "lineCount": self.line_count,
            "group": self.group,
            "dependencyCount": self.dependency_count,
            "dependentCount": self.dependent_count,
            "isCircular": self.is_circular,
        }


@dataclass
class GraphEdge:
    source: str
    target: str
    kind: DependencyKind  # kind of the first occurrence
    title: str
    count: int = 1
    is_circular: bool = False

    @property
    def weight(self) -> int:
        """Display weight; ``count`` itself is never capped."""
        return min(self.count, MAX_EDGE_WEIGHT)

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": self.source,
            "to": self.target,
            "value": self.weight,
            "count": self.count,
            "type": self.kind.value,
            "title": self.title,
            "isCircular": self.is_circular,
        }


@dataclass(frozen=True)
class GraphSummary:
    total_nodes: int = 0
    total_edges: int = 0
    languages: tuple[str, ...] = ()
    cycle_count: int = 0
    max_dependencies: int = 0
    max_dependents: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalNodes": self.total_nodes,
            "totalEdges": self.total_edges,
            "languages": list(self.languages),
            "circularCount": self.cycle_count,
            "maxDependencies": self.max_dependencies,
            "maxDependents": self.max_dependents,
        }


@dataclass
class GraphData:
    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[GraphEdge] = field(default_factory=list)
    cycles: list[list[str]] = field(default_factory=list)
    summary: GraphSummary = field(default_factory=GraphSummary)

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
            "circularDependencies": [list(c) for c in self.cycles],
            "statistics": self.summary.to_dict(),
        }
