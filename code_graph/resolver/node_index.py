"""Map resolved paths back onto collected files."""

from __future__ import annotations

import posixpath


class NodeIndex:
    """Lookup of node ids by relative path, falling back to base filename.

    The base-name fallback picks the first collected file with that name,
    so two same-named files in different directories can bind an edge to
    the wrong one.
    """

    def __init__(self, node_ids: list[str]):
        self._ids: set[str] = set(node_ids)
        self._by_basename: dict[str, str] = {}
        for node_id in node_ids:
            self._by_basename.setdefault(posixpath.basename(node_id), node_id)

    def match(self, resolved_path: str) -> str | None:
        if resolved_path in self._ids:
            return resolved_path
        return self._by_basename.get(posixpath.basename(resolved_path))
