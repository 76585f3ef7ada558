"""Abstract base extractor with shared pattern scanning."""

from __future__ import annotations

import abc
import re

from code_graph.models import DependencyKind, DependencyReference, Language, SourceFile


class BaseExtractor(abc.ABC):
    """Base class for language-specific dependency extractors.

    Extraction is lexical: every match of a pattern is reported, including
    matches inside comments or string literals.
    """

    languages: tuple[Language, ...]

    @abc.abstractmethod
    def extract(self, file: SourceFile) -> list[DependencyReference]:
        """Return the raw dependency references found in ``file``."""

    @staticmethod
    def _line_number(source: str, offset: int) -> int:
        return source.count("\n", 0, offset) + 1

    def _scan(
        self,
        source: str,
        pattern: re.Pattern[str],
        kind: DependencyKind,
    ) -> list[DependencyReference]:
        refs: list[DependencyReference] = []
        for m in pattern.finditer(source):
            refs.append(DependencyReference(
                target=m.group(1),
                kind=kind,
                line_number=self._line_number(source, m.start()),
            ))
        return refs
