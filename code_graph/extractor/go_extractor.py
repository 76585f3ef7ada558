"""Go import extraction for single-line and parenthesized forms."""

from __future__ import annotations

import re

from code_graph.extractor.base import BaseExtractor
from code_graph.models import DependencyKind, DependencyReference, Language, SourceFile

# The block alternative only consumes the block; group 1 is set for `import "x"`
_IMPORT_RE = re.compile(r"import\s+(?:\([^)]*\)|['\"]([^'\"]+)['\"])")
_IMPORT_BLOCK_RE = re.compile(r"import\s*\(([\s\S]*?)\)")
_QUOTED_RE = re.compile(r"['\"]([^'\"]+)['\"]")


class GoExtractor(BaseExtractor):
    languages = (Language.GO,)

    def extract(self, file: SourceFile) -> list[DependencyReference]:
        source = file.content
        refs: list[DependencyReference] = []

        for m in _IMPORT_RE.finditer(source):
            if m.group(1):
                refs.append(DependencyReference(
                    target=m.group(1),
                    kind=DependencyKind.IMPORT,
                    line_number=self._line_number(source, m.start()),
                ))

        for block in _IMPORT_BLOCK_RE.finditer(source):
            body_start = block.start(1)
            for entry in _QUOTED_RE.finditer(block.group(1)):
                refs.append(DependencyReference(
                    target=entry.group(1),
                    kind=DependencyKind.IMPORT,
                    line_number=self._line_number(source, body_start + entry.start()),
                ))

        return refs
