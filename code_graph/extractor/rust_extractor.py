"""Rust ``use`` extraction. Paths keep their ``::`` separators."""

from __future__ import annotations

import re

from code_graph.extractor.base import BaseExtractor
from code_graph.models import DependencyKind, DependencyReference, Language, SourceFile

_USE_RE = re.compile(r"^use\s+([\w:]+)", re.MULTILINE)


class RustExtractor(BaseExtractor):
    languages = (Language.RUST,)

    def extract(self, file: SourceFile) -> list[DependencyReference]:
        return self._scan(file.content, _USE_RE, DependencyKind.IMPORT)
