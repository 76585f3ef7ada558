"""Circular dependency detection over a finished graph."""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence


def detect_cycles(
    node_ids: Iterable[str],
    adjacency: Mapping[str, Sequence[str]],
) -> list[list[str]]:
    """Find directed cycles with a depth-first search from each unvisited node.

    A back-edge to a node on the current path records the path slice from
    that node to the current one. Cycles are deduplicated by node set:
    two different cycles through exactly the same files are reported once.
    The walk uses an explicit stack but visits neighbors in the same order
    a recursive DFS would.
    """
    cycles: list[list[str]] = []
    seen: set[tuple[str, ...]] = set()
    visited: set[str] = set()
    on_path: set[str] = set()
    path: list[str] = []

    def _record(node_id: str) -> None:
        cycle = path[path.index(node_id):]
        key = tuple(sorted(cycle))
        if key not in seen:
            seen.add(key)
            cycles.append(cycle)

    def _enter(node_id: str) -> None:
        visited.add(node_id)
        on_path.add(node_id)
        path.append(node_id)
        stack.append(iter(adjacency.get(node_id, ())))

    stack: list = []
    for root in node_ids:
        if root in visited:
            continue
        _enter(root)
        while stack:
            for neighbor in stack[-1]:
                if neighbor in on_path:
                    _record(neighbor)
                elif neighbor not in visited:
                    _enter(neighbor)
                    break
            else:
                stack.pop()
                on_path.discard(path.pop())

    return cycles


def cycle_edges(cycle: Sequence[str]) -> list[tuple[str, str]]:
    """Consecutive pairs of a cycle, wrapping from the last node to the first."""
    return [(cycle[i], cycle[(i + 1) % len(cycle)]) for i in range(len(cycle))]
