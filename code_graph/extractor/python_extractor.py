"""Python dependency extraction.

Only statements starting at column zero are seen; imports nested inside
functions or ``if`` blocks are not reported.
"""

from __future__ import annotations

import re

from code_graph.extractor.base import BaseExtractor
from code_graph.models import DependencyKind, DependencyReference, Language, SourceFile

_IMPORT_RE = re.compile(r"^import\s+([\w.]+)", re.MULTILINE)
_FROM_IMPORT_RE = re.compile(r"^from\s+([\w.]+)\s+import", re.MULTILINE)


class PythonExtractor(BaseExtractor):
    languages = (Language.PYTHON,)

    def extract(self, file: SourceFile) -> list[DependencyReference]:
        source = file.content
        return (
            self._scan(source, _IMPORT_RE, DependencyKind.IMPORT)
            + self._scan(source, _FROM_IMPORT_RE, DependencyKind.FROM)
        )
