"""Dependency graph builder: one node per file, one weighted edge per file pair, cycle marking."""

from __future__ import annotations

import posixpath
from typing import Iterable

from code_graph.analysis.cycles import cycle_edges, detect_cycles
from code_graph.analysis.graph_models import GraphData, GraphEdge, GraphNode, GraphSummary
from code_graph.models import ResolvedDependency, SourceFile
from code_graph.resolver.node_index import NodeIndex
from code_graph.scanner.language_map import language_group


def node_id_for(relative_path: str) -> str:
    return relative_path.replace("\\", "/")


class DependencyGraphBuilder:
    """Build a dependency graph from collected files and their resolved references."""

    def build(
        self,
        files: Iterable[tuple[SourceFile, list[ResolvedDependency]]],
    ) -> GraphData:
        entries = list(files)
        graph = GraphData()

        # Step 1: Nodes
        for file, _ in entries:
            graph.nodes.append(self._make_node(file))

        # Step 2: Edges, aggregated per ordered pair
        index = NodeIndex([n.id for n in graph.nodes])
        edge_map: dict[tuple[str, str], GraphEdge] = {}
        for file, deps in entries:
            source_id = node_id_for(file.relative_path)
            for dep in deps:
                target_id = index.match(dep.resolved_path)
                if target_id is None or target_id == source_id:
                    continue
                self._add_edge(graph, edge_map, file, source_id, target_id, dep)

        # Step 3: Counts
        by_id = {n.id: n for n in graph.nodes}
        for edge in graph.edges:
            by_id[edge.source].dependency_count += 1
            by_id[edge.target].dependent_count += 1

        # Step 4: Cycles
        adjacency: dict[str, list[str]] = {}
        for edge in graph.edges:
            adjacency.setdefault(edge.source, []).append(edge.target)
        graph.cycles = detect_cycles([n.id for n in graph.nodes], adjacency)
        self._mark_circular(graph, by_id, edge_map)

        graph.summary = self.summarize(graph)
        return graph

    @staticmethod
    def summarize(graph: GraphData) -> GraphSummary:
        languages: list[str] = []
        for node in graph.nodes:
            if node.language.value not in languages:
                languages.append(node.language.value)
        return GraphSummary(
            total_nodes=len(graph.nodes),
            total_edges=len(graph.edges),
            languages=tuple(languages),
            cycle_count=len(graph.cycles),
            max_dependencies=max((n.dependency_count for n in graph.nodes), default=0),
            max_dependents=max((n.dependent_count for n in graph.nodes), default=0),
        )

    @staticmethod
    def _make_node(file: SourceFile) -> GraphNode:
        node_id = node_id_for(file.relative_path)
        return GraphNode(
            id=node_id,
            label=posixpath.basename(node_id),
            path=node_id,
            language=file.language,
            size=len(file.content.encode("utf-8")),
            line_count=file.content.count("\n") + 1,
            group=language_group(file.language),
        )

    @staticmethod
    def _add_edge(
        graph: GraphData,
        edge_map: dict[tuple[str, str], GraphEdge],
        file: SourceFile,
        source_id: str,
        target_id: str,
        dep: ResolvedDependency,
    ) -> None:
        existing = edge_map.get((source_id, target_id))
        if existing is not None:
            existing.count += 1
            return
        kind = dep.reference.kind
        edge = GraphEdge(
            source=source_id,
            target=target_id,
            kind=kind,
            title=(
                f"{posixpath.basename(source_id)} → "
                f"{posixpath.basename(dep.resolved_path)} ({kind.value})"
            ),
        )
        edge_map[(source_id, target_id)] = edge
        graph.edges.append(edge)

    @staticmethod
    def _mark_circular(
        graph: GraphData,
        by_id: dict[str, GraphNode],
        edge_map: dict[tuple[str, str], GraphEdge],
    ) -> None:
        for cycle in graph.cycles:
            for node_id in cycle:
                by_id[node_id].is_circular = True
            for pair in cycle_edges(cycle):
                edge = edge_map.get(pair)
                if edge is not None:
                    edge.is_circular = True
