"""Path-style resolution for JS/TS, Go, and C/C++ includes."""

from __future__ import annotations

import os
from pathlib import Path

from code_graph.resolver.aliases import AliasTable
from code_graph.resolver.base import BaseResolver

JS_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx")
GO_EXTENSIONS = (".go",)
INCLUDE_EXTENSIONS = (".h", ".hpp", ".c", ".cpp")


class RelativeResolver(BaseResolver):
    """Resolves ``./x``-style references by extension and ``index`` probing.

    Aliases are consulted first, in declaration order. When ``any_path`` is
    set, references without a leading ``.`` or ``/`` are treated as
    relative too (used for Go, where module paths stay inside one project).
    """

    def __init__(
        self,
        root: Path,
        extensions: tuple[str, ...],
        aliases: AliasTable | None = None,
        any_path: bool = False,
    ):
        super().__init__(root)
        self.extensions = extensions
        self.aliases = aliases or AliasTable()
        self.any_path = any_path

    def resolve(self, target: str, current_dir: Path) -> str | None:
        for prefix, directory in self.aliases:
            if target.startswith(prefix):
                # Alias directories are always under the root, even with a leading "/"
                mapped = os.path.join(str(self.root), directory.lstrip("/") + target[len(prefix):])
                hit = self._probe(os.path.normpath(mapped), self.extensions, bare=False)
                if hit:
                    return hit

        if target.startswith((".", "/")) or self.any_path:
            full = os.path.normpath(os.path.join(str(current_dir), target))
            return self._probe(full, self.extensions, bare=True)
        return None


class IncludeResolver(BaseResolver):
    """Resolves ``#include`` paths relative to the including file."""

    extensions = INCLUDE_EXTENSIONS

    def resolve(self, target: str, current_dir: Path) -> str | None:
        full = os.path.normpath(os.path.join(str(current_dir), target))
        for ext in self.extensions:
            hit = self._hit(full + ext)
            if hit:
                return hit
        return self._hit(full)
