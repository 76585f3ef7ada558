"""Path alias table loaded from a project's tsconfig.json."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class CompilerOptions(BaseModel):
    # Entries are checked one by one in parse_alias_table
    paths: dict[str, Any] = Field(default_factory=dict)


class TsConfig(BaseModel):
    compilerOptions: CompilerOptions = Field(default_factory=CompilerOptions)


@dataclass(frozen=True)
class AliasTable:
    """Ordered ``(prefix, directory)`` pairs; directories are root-relative."""
    entries: tuple[tuple[str, str], ...] = ()

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def _strip_wildcard(value: str) -> str:
    return value[:-2] if value.endswith("/*") else value


def parse_alias_table(text: str) -> AliasTable:
    """Build an alias table from tsconfig JSON text.

    Raises ``ValidationError`` when the text is not valid JSON or
    ``compilerOptions.paths`` is not an object. Individual aliases that do
    not map to a non-empty list of paths are skipped.
    """
    config = TsConfig.model_validate_json(text)
    entries: list[tuple[str, str]] = []
    for key, targets in config.compilerOptions.paths.items():
        if not isinstance(targets, list) or not targets or not isinstance(targets[0], str):
            logger.debug("Skipping alias %r: expected a non-empty list of paths", key)
            continue
        entries.append((_strip_wildcard(key), _strip_wildcard(targets[0])))
    return AliasTable(entries=tuple(entries))


def load_alias_table(root: Path, filename: str = "tsconfig.json") -> AliasTable:
    """Load aliases from ``root/filename``; any failure yields an empty table."""
    config_path = Path(root) / filename
    if not config_path.is_file():
        return AliasTable()
    try:
        text = config_path.read_text(encoding="utf-8-sig")
        return parse_alias_table(text)
    except (OSError, UnicodeDecodeError, ValidationError) as e:
        logger.warning("Ignoring path aliases from %s: %s", config_path, e)
        return AliasTable()
