"""Scan pipeline: collect -> extract -> resolve -> build graph -> detect cycles."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable

from code_graph.analysis.dependency_graph import DependencyGraphBuilder
from code_graph.analysis.graph_models import GraphData
from code_graph.extractor import extract_dependencies
from code_graph.models import ResolvedDependency, ScanConfig, SourceFile
from code_graph.resolver import PathResolver, load_alias_table
from code_graph.scanner import collect_files

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def run_scan(config: ScanConfig, progress: ProgressCallback | None = None) -> GraphData:
    """Run a full scan of ``config.source_dir`` and return the graph.

    Raises ``ScanError`` when the tree cannot be traversed; every other
    problem only shrinks the resulting graph.
    """
    root = Path(config.source_dir).resolve()
    logger.info("Scanning %s", root)

    # Stage 1: Collect
    if progress:
        progress("Collecting", 0, 1)
    files = collect_files(root, skip_dirs=config.skip_dirs)
    if progress:
        progress("Collecting", 1, 1)

    # Stage 2: Extract + resolve per file
    resolver = PathResolver(root, load_alias_table(root, config.tsconfig_name))

    def _process(file: SourceFile) -> tuple[SourceFile, list[ResolvedDependency]]:
        refs = extract_dependencies(file)
        resolved = resolver.resolve_all(refs, file)
        logger.debug(
            "%s: %d reference(s), %d resolved", file.relative_path, len(refs), len(resolved),
        )
        return file, resolved

    entries: list[tuple[SourceFile, list[ResolvedDependency]]] = []
    if config.max_workers > 1:
        if progress:
            progress("Extracting", 0, len(files))
        with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
            entries = list(pool.map(_process, files))
    else:
        for i, file in enumerate(files):
            if progress:
                progress("Extracting", i, len(files))
            entries.append(_process(file))
    if progress:
        progress("Extracting", len(files), len(files))

    # Stage 3: Build graph and detect cycles
    if progress:
        progress("Building graph", 0, 1)
    graph = DependencyGraphBuilder().build(entries)
    if progress:
        progress("Building graph", 1, 1)
        progress("Detecting cycles", 1, 1)

    logger.info(
        "Scan finished: %d node(s), %d edge(s), %d cycle(s)",
        graph.summary.total_nodes, graph.summary.total_edges, graph.summary.cycle_count,
    )
    return graph
