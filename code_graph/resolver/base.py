"""Abstract base resolver with shared filesystem probing."""

from __future__ import annotations

import abc
import os
from pathlib import Path


class BaseResolver(abc.ABC):
    """Maps a raw reference string onto a file under the scan root."""

    def __init__(self, root: Path):
        self.root = Path(root)

    @abc.abstractmethod
    def resolve(self, target: str, current_dir: Path) -> str | None:
        """Return the root-relative path of the referenced file, or None."""

    def _relative(self, path: str) -> str:
        return os.path.relpath(path, self.root).replace(os.sep, "/")

    def _hit(self, path: str) -> str | None:
        if os.path.isfile(path):
            return self._relative(path)
        return None

    def _probe(self, base: str, extensions: tuple[str, ...], bare: bool) -> str | None:
        """Try ``base+ext`` then ``base/index+ext`` per extension, then ``base``."""
        for ext in extensions:
            hit = self._hit(base + ext) or self._hit(os.path.join(base, "index" + ext))
            if hit:
                return hit
        if bare:
            return self._hit(base)
        return None
