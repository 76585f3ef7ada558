"""Java ``import`` and C# ``using`` extraction."""

from __future__ import annotations

import re

from code_graph.extractor.base import BaseExtractor
from code_graph.models import DependencyKind, DependencyReference, Language, SourceFile

_JAVA_IMPORT_RE = re.compile(r"^import\s+([\w.]+);", re.MULTILINE)
_CSHARP_USING_RE = re.compile(r"^using\s+([\w.]+);", re.MULTILINE)


class JavaExtractor(BaseExtractor):
    languages = (Language.JAVA,)

    def extract(self, file: SourceFile) -> list[DependencyReference]:
        return self._scan(file.content, _JAVA_IMPORT_RE, DependencyKind.IMPORT)


class CSharpExtractor(BaseExtractor):
    languages = (Language.CSHARP,)

    def extract(self, file: SourceFile) -> list[DependencyReference]:
        return self._scan(file.content, _CSHARP_USING_RE, DependencyKind.USING)
