"""Extractor registry."""

from __future__ import annotations

from code_graph.models import DependencyReference, Language, SourceFile
from code_graph.extractor.base import BaseExtractor
from code_graph.extractor.c_extractor import CExtractor
from code_graph.extractor.dotted_extractor import CSharpExtractor, JavaExtractor
from code_graph.extractor.go_extractor import GoExtractor
from code_graph.extractor.js_extractor import JsExtractor
from code_graph.extractor.python_extractor import PythonExtractor
from code_graph.extractor.rust_extractor import RustExtractor

_EXTRACTORS: dict[Language, BaseExtractor] = {}
for _extractor in (
    JsExtractor(),
    PythonExtractor(),
    JavaExtractor(),
    CSharpExtractor(),
    CExtractor(),
    GoExtractor(),
    RustExtractor(),
):
    for _lang in _extractor.languages:
        _EXTRACTORS[_lang] = _extractor


def get_extractor(language: Language) -> BaseExtractor | None:
    return _EXTRACTORS.get(language)


def extract_dependencies(file: SourceFile) -> list[DependencyReference]:
    """Extract raw references from a file; languages without patterns yield none."""
    extractor = get_extractor(file.language)
    if extractor is None:
        return []
    return extractor.extract(file)


__all__ = [
    "BaseExtractor",
    "CExtractor",
    "CSharpExtractor",
    "GoExtractor",
    "JavaExtractor",
    "JsExtractor",
    "PythonExtractor",
    "RustExtractor",
    "extract_dependencies",
    "get_extractor",
]
