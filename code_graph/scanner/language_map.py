"""Shared extension-to-language mapping for the collector and graph builder."""

from __future__ import annotations

from code_graph.models import Language

EXT_TO_LANGUAGE: dict[str, Language] = {
    ".ts": Language.TYPESCRIPT,
    ".tsx": Language.TYPESCRIPT,
    ".js": Language.JAVASCRIPT,
    ".jsx": Language.JAVASCRIPT,
    ".py": Language.PYTHON,
    ".java": Language.JAVA,
    ".cs": Language.CSHARP,
    ".cpp": Language.CPP,
    ".hpp": Language.CPP,
    ".c": Language.C,
    ".h": Language.C,
    ".go": Language.GO,
    ".rs": Language.RUST,
    ".rb": Language.RUBY,
    ".php": Language.PHP,
    ".swift": Language.SWIFT,
    ".kt": Language.KOTLIN,
    ".scala": Language.SCALA,
    ".dart": Language.DART,
    ".vue": Language.VUE,
    ".svelte": Language.SVELTE,
}

# Presentation buckets; languages sharing a toolchain share a group
LANGUAGE_GROUPS: dict[Language, int] = {
    Language.TYPESCRIPT: 1,
    Language.JAVASCRIPT: 1,
    Language.PYTHON: 2,
    Language.JAVA: 3,
    Language.CSHARP: 4,
    Language.CPP: 5,
    Language.C: 5,
    Language.GO: 6,
    Language.RUST: 7,
    Language.RUBY: 8,
    Language.PHP: 9,
    Language.SWIFT: 10,
    Language.KOTLIN: 11,
    Language.SCALA: 12,
    Language.DART: 13,
    Language.VUE: 14,
    Language.SVELTE: 15,
}


def language_for_extension(ext: str) -> Language:
    return EXT_TO_LANGUAGE.get(ext, Language.UNKNOWN)


def language_group(language: Language) -> int:
    return LANGUAGE_GROUPS.get(language, 0)
