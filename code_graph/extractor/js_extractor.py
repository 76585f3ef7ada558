"""JavaScript/TypeScript dependency extraction using regex patterns."""

from __future__ import annotations

import re

from code_graph.extractor.base import BaseExtractor
from code_graph.models import DependencyKind, DependencyReference, Language, SourceFile

# import X from '...', import {a, b} from '...', import * as X from '...'
_IMPORT_RE = re.compile(
    r"import\s+(?:(?:\*\s+as\s+\w+)|(?:\{[^}]*\})|(?:\w+)|(?:\w+\s*,\s*\{[^}]*\}))"
    r"\s+from\s+['\"]([^'\"]+)['\"]"
)
_REQUIRE_RE = re.compile(r"require\s*\(\s*['\"]([^'\"]+)['\"]\s*\)")
_DYNAMIC_IMPORT_RE = re.compile(r"import\s*\(\s*['\"]([^'\"]+)['\"]\s*\)")
_EXPORT_FROM_RE = re.compile(r"export\s+.*?\s+from\s+['\"]([^'\"]+)['\"]")


class JsExtractor(BaseExtractor):
    languages = (Language.TYPESCRIPT, Language.JAVASCRIPT)

    def extract(self, file: SourceFile) -> list[DependencyReference]:
        source = file.content
        refs: list[DependencyReference] = []
        refs.extend(self._scan(source, _IMPORT_RE, DependencyKind.IMPORT))
        refs.extend(self._scan(source, _REQUIRE_RE, DependencyKind.REQUIRE))
        refs.extend(self._scan(source, _DYNAMIC_IMPORT_RE, DependencyKind.DYNAMIC_IMPORT))
        refs.extend(self._scan(source, _EXPORT_FROM_RE, DependencyKind.EXPORT))
        return refs
