"""Data models for the code-graph pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SKIP_DIRS: tuple[str, ...] = (
    "node_modules", ".git", "dist", "build", "out", ".vscode",
    "bin", "obj", "__pycache__", ".next", ".cache",
)


class Language(enum.Enum):
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    JAVA = "java"
    CSHARP = "csharp"
    CPP = "cpp"
    C = "c"
    GO = "go"
    RUST = "rust"
    RUBY = "ruby"
    PHP = "php"
    SWIFT = "swift"
    KOTLIN = "kotlin"
    SCALA = "scala"
    DART = "dart"
    VUE = "vue"
    SVELTE = "svelte"
    UNKNOWN = "unknown"


class DependencyKind(enum.Enum):
    IMPORT = "import"
    REQUIRE = "require"
    DYNAMIC_IMPORT = "dynamic-import"
    INCLUDE = "include"
    USING = "using"
    FROM = "from"
    EXPORT = "export"


class ScanError(Exception):
    """The project tree could not be traversed."""


@dataclass(frozen=True)
class SourceFile:
    """Result from the collector stage."""
    path: Path
    relative_path: str  # forward slashes
    content: str
    language: Language

    @property
    def directory(self) -> Path:
        return self.path.parent


@dataclass(frozen=True)
class DependencyReference:
    """Result from the extractor stage, before resolution."""
    target: str
    kind: DependencyKind
    line_number: int | None = None


@dataclass(frozen=True)
class ResolvedDependency:
    """A reference whose target was found on disk."""
    reference: DependencyReference
    resolved_path: str  # relative to the scan root


@dataclass
class ScanConfig:
    """Configuration for a scan."""
    source_dir: Path = field(default_factory=lambda: Path("."))
    skip_dirs: list[str] = field(default_factory=lambda: list(DEFAULT_SKIP_DIRS))
    max_workers: int = 1
    tsconfig_name: str = "tsconfig.json"
