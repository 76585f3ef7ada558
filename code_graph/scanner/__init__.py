"""File collection stage."""

from __future__ import annotations

from pathlib import Path

from code_graph.models import SourceFile
from code_graph.scanner.collector import FileCollector
from code_graph.scanner.language_map import (
    EXT_TO_LANGUAGE,
    LANGUAGE_GROUPS,
    language_for_extension,
    language_group,
)


def collect_files(directory: Path, skip_dirs: list[str] | None = None) -> list[SourceFile]:
    """Collect every eligible source file under ``directory``."""
    return FileCollector(skip_dirs=skip_dirs).collect(directory)


__all__ = [
    "EXT_TO_LANGUAGE",
    "LANGUAGE_GROUPS",
    "FileCollector",
    "collect_files",
    "language_for_extension",
    "language_group",
]
