"""Module-path resolution for Python, Java/C#, and Rust."""

from __future__ import annotations

import os
from pathlib import Path

from code_graph.resolver.base import BaseResolver

MAX_PARENT_LEVELS = 10


class PythonResolver(BaseResolver):
    """Walks dotted segments from the importing file's directory.

    Each segment must be either ``<segment>.py`` (done) or a package
    directory with an ``__init__.py`` (descend); anything else misses.
    """

    def resolve(self, target: str, current_dir: Path) -> str | None:
        search = str(current_dir)
        for part in target.split("."):
            candidate = os.path.join(search, part)
            hit = self._hit(candidate + ".py")
            if hit:
                return hit
            if not os.path.isfile(os.path.join(candidate, "__init__.py")):
                return None
            search = candidate
        return None


class DottedResolver(BaseResolver):
    """Java/C#: ``a.b.Name`` -> ``a/b/Name<ext>``, searched upwards from the file."""

    def __init__(self, root: Path, extension: str):
        super().__init__(root)
        self.extension = extension

    def resolve(self, target: str, current_dir: Path) -> str | None:
        parts = target.split(".")
        class_name = parts[-1]
        package_path = os.path.join(*parts[:-1]) if len(parts) > 1 else ""

        search = str(current_dir)
        for _ in range(MAX_PARENT_LEVELS):
            hit = self._hit(os.path.join(search, package_path, class_name + self.extension))
            if hit:
                return hit
            parent = os.path.dirname(search)
            if parent == search:
                break
            search = parent
        return None


class RustResolver(BaseResolver):
    """Walks ``::`` segments: ``lib.rs`` wins, ``mod.rs`` descends, ``<seg>.rs`` ends."""

    def resolve(self, target: str, current_dir: Path) -> str | None:
        search = str(current_dir)
        for part in target.split("::"):
            candidate = os.path.join(search, part)
            hit = self._hit(os.path.join(candidate, "lib.rs"))
            if hit:
                return hit
            if os.path.isfile(os.path.join(candidate, "mod.rs")):
                search = candidate
                continue
            return self._hit(candidate + ".rs")
        return None
