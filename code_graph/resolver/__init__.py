"""Resolver registry and dispatcher."""

from __future__ import annotations

import logging
from pathlib import Path

from code_graph.models import DependencyReference, Language, ResolvedDependency, SourceFile
from code_graph.resolver.aliases import AliasTable, load_alias_table, parse_alias_table
from code_graph.resolver.base import BaseResolver
from code_graph.resolver.module_resolver import DottedResolver, PythonResolver, RustResolver
from code_graph.resolver.node_index import NodeIndex
from code_graph.resolver.relative_resolver import (
    GO_EXTENSIONS,
    JS_EXTENSIONS,
    IncludeResolver,
    RelativeResolver,
)

logger = logging.getLogger(__name__)


def _build_registry(root: Path, aliases: AliasTable) -> dict[Language, BaseResolver]:
    js = RelativeResolver(root, JS_EXTENSIONS, aliases=aliases)
    include = IncludeResolver(root)
    return {
        Language.TYPESCRIPT: js,
        Language.JAVASCRIPT: js,
        Language.GO: RelativeResolver(root, GO_EXTENSIONS, any_path=True),
        Language.C: include,
        Language.CPP: include,
        Language.PYTHON: PythonResolver(root),
        Language.JAVA: DottedResolver(root, ".java"),
        Language.CSHARP: DottedResolver(root, ".cs"),
        Language.RUST: RustResolver(root),
    }


class PathResolver:
    """Resolves raw references of any supported language for one scan root."""

    def __init__(self, root: Path, aliases: AliasTable | None = None):
        self.root = Path(root)
        self.aliases = aliases or AliasTable()
        self._resolvers = _build_registry(self.root, self.aliases)

    def resolve(self, ref: DependencyReference, file: SourceFile) -> str | None:
        resolver = self._resolvers.get(file.language)
        if resolver is None:
            return None
        resolved = resolver.resolve(ref.target, file.directory)
        if resolved is None:
            logger.debug(
                "Unresolved %s %r in %s:%s",
                ref.kind.value, ref.target, file.relative_path, ref.line_number,
            )
        return resolved

    def resolve_all(
        self, refs: list[DependencyReference], file: SourceFile,
    ) -> list[ResolvedDependency]:
        resolved: list[ResolvedDependency] = []
        for ref in refs:
            path = self.resolve(ref, file)
            if path is not None:
                resolved.append(ResolvedDependency(reference=ref, resolved_path=path))
        return resolved


__all__ = [
    "AliasTable",
    "BaseResolver",
    "DottedResolver",
    "IncludeResolver",
    "NodeIndex",
    "PathResolver",
    "PythonResolver",
    "RelativeResolver",
    "RustResolver",
    "load_alias_table",
    "parse_alias_table",
]
