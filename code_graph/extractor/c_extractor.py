"""C/C++ ``#include`` extraction."""

from __future__ import annotations

import re

from code_graph.extractor.base import BaseExtractor
from code_graph.models import DependencyKind, DependencyReference, Language, SourceFile

# Both <system> and "local" forms
_INCLUDE_RE = re.compile(r"#include\s+[<\"]([^>\"]+)[>\"]")


class CExtractor(BaseExtractor):
    languages = (Language.C, Language.CPP)

    def extract(self, file: SourceFile) -> list[DependencyReference]:
        return self._scan(file.content, _INCLUDE_RE, DependencyKind.INCLUDE)
