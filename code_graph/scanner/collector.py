"""Walk a project tree and read every source file with a known extension."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from code_graph.models import DEFAULT_SKIP_DIRS, Language, ScanError, SourceFile
from code_graph.scanner.language_map import language_for_extension

logger = logging.getLogger(__name__)


class FileCollector:
    """Yields a SourceFile for each eligible file under a root directory.

    Directories are skipped when one of their path segments equals an
    entry of ``skip_dirs`` exactly; a file called ``build.ts`` is still
    collected when ``build`` is ignored.
    """

    def __init__(self, skip_dirs: list[str] | None = None):
        self.skip_dirs = set(skip_dirs if skip_dirs is not None else DEFAULT_SKIP_DIRS)

    def iter_files(self, root: Path) -> Iterator[SourceFile]:
        root = Path(root)
        if not root.is_dir():
            raise ScanError(f"Not a directory: {root}")

        def _on_error(err: OSError) -> None:
            raise ScanError(f"Cannot read directory {err.filename}: {err.strerror}") from err

        for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
            dirnames[:] = sorted(d for d in dirnames if d not in self.skip_dirs)

            for name in sorted(filenames):
                ext = os.path.splitext(name)[1]
                language = language_for_extension(ext)
                if language is Language.UNKNOWN:
                    continue

                full = Path(dirpath) / name
                if not full.is_file():
                    continue
                try:
                    # newline="" keeps \r\n intact for byte sizes
                    with full.open(encoding="utf-8", newline="") as f:
                        content = f.read()
                except (OSError, UnicodeDecodeError) as e:
                    logger.warning("Could not read file %s: %s", full, e)
                    continue

                yield SourceFile(
                    path=full,
                    relative_path=full.relative_to(root).as_posix(),
                    content=content,
                    language=language,
                )

    def collect(self, root: Path) -> list[SourceFile]:
        return list(self.iter_files(root))
