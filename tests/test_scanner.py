"""Tests for the file collector."""

import logging
from pathlib import Path

import pytest

from code_graph.models import Language, ScanError
from code_graph.scanner import collect_files, language_for_extension, language_group
from code_graph.scanner.collector import FileCollector


def _write(root: Path, rel: str, text: str = "") -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestLanguageMap:
    def test_known_extensions(self):
        assert language_for_extension(".tsx") == Language.TYPESCRIPT
        assert language_for_extension(".jsx") == Language.JAVASCRIPT
        assert language_for_extension(".h") == Language.C
        assert language_for_extension(".hpp") == Language.CPP
        assert language_for_extension(".svelte") == Language.SVELTE

    def test_unknown_extension(self):
        assert language_for_extension(".md") == Language.UNKNOWN

    def test_groups(self):
        assert language_group(Language.TYPESCRIPT) == language_group(Language.JAVASCRIPT) == 1
        assert language_group(Language.C) == language_group(Language.CPP) == 5
        assert language_group(Language.UNKNOWN) == 0


class TestCollector:
    def test_collects_supported_files(self, tmp_path):
        _write(tmp_path, "src/app.ts", "export const x = 1;\n")
        _write(tmp_path, "main.py", "print('hi')\n")
        _write(tmp_path, "README.md", "# readme\n")
        _write(tmp_path, "notes.txt", "notes\n")

        files = collect_files(tmp_path)
        by_path = {f.relative_path: f for f in files}

        assert set(by_path) == {"src/app.ts", "main.py"}
        assert by_path["src/app.ts"].language == Language.TYPESCRIPT
        assert by_path["main.py"].language == Language.PYTHON
        assert by_path["main.py"].content == "print('hi')\n"
        assert by_path["src/app.ts"].path == tmp_path / "src" / "app.ts"

    def test_ignored_directories_are_exact_segments(self, tmp_path):
        _write(tmp_path, "node_modules/lib/index.js")
        _write(tmp_path, "build/out.js")
        _write(tmp_path, "src/__pycache__/mod.py")
        _write(tmp_path, "src/build.ts")
        _write(tmp_path, "builder/tool.ts")

        paths = {f.relative_path for f in collect_files(tmp_path)}

        assert paths == {"src/build.ts", "builder/tool.ts"}

    def test_custom_skip_dirs(self, tmp_path):
        _write(tmp_path, "vendor/a.go")
        _write(tmp_path, "node_modules/b.js")

        paths = {f.relative_path for f in FileCollector(skip_dirs=["vendor"]).collect(tmp_path)}

        assert paths == {"node_modules/b.js"}

    def test_unreadable_file_is_skipped(self, tmp_path, caplog):
        _write(tmp_path, "good.py", "import os\n")
        (tmp_path / "bad.py").write_bytes(b"\xff\xfe\x00\x81 not utf-8")

        with caplog.at_level(logging.WARNING, logger="code_graph.scanner.collector"):
            files = collect_files(tmp_path)

        assert [f.relative_path for f in files] == ["good.py"]
        assert any("bad.py" in r.getMessage() for r in caplog.records)

    def test_traversal_order_is_stable(self, tmp_path):
        for rel in ("b.ts", "a.ts", "z/c.ts", "m/d.ts"):
            _write(tmp_path, rel)

        first = [f.relative_path for f in collect_files(tmp_path)]
        second = [f.relative_path for f in collect_files(tmp_path)]

        assert first == second
        assert set(first) == {"a.ts", "b.ts", "m/d.ts", "z/c.ts"}

    def test_iter_files_is_lazy(self, tmp_path):
        _write(tmp_path, "a.rs")
        gen = FileCollector().iter_files(tmp_path)
        assert next(gen).relative_path == "a.rs"
        with pytest.raises(StopIteration):
            next(gen)

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(ScanError):
            collect_files(tmp_path / "does-not-exist")

    def test_root_is_file_raises(self, tmp_path):
        path = _write(tmp_path, "a.ts")
        with pytest.raises(ScanError):
            collect_files(path)

    def test_empty_directory(self, tmp_path):
        assert collect_files(tmp_path) == []
