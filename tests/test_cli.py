"""Tests for the click CLI."""

import json
from pathlib import Path

from click.testing import CliRunner

from code_graph.cli import cli


def _write(root: Path, rel: str, text: str = "") -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _project(root: Path) -> Path:
    _write(root, "a.ts", "import {b} from './b';\n")
    _write(root, "b.ts", "import {a} from './a';\n")
    _write(root, "c.py", "import os\n")
    return root


class TestScanCommand:
    def test_lists_files(self, tmp_path):
        result = CliRunner().invoke(cli, ["scan", str(_project(tmp_path))])
        assert result.exit_code == 0, result.output
        assert "Found 3 file(s)" in result.output
        assert "a.ts" in result.output
        assert "cycles: 1" in result.output

    def test_language_filter(self, tmp_path):
        result = CliRunner().invoke(cli, ["scan", str(_project(tmp_path)), "-l", "python"])
        assert result.exit_code == 0, result.output
        assert "Found 1 file(s)" in result.output

    def test_empty_directory(self, tmp_path):
        result = CliRunner().invoke(cli, ["scan", str(tmp_path)])
        assert result.exit_code == 0
        assert "No source files found." in result.output

    def test_missing_directory(self, tmp_path):
        result = CliRunner().invoke(cli, ["scan", str(tmp_path / "missing")])
        assert result.exit_code != 0


class TestGraphCommand:
    def test_stdout(self, tmp_path):
        result = CliRunner().invoke(cli, ["graph", str(_project(tmp_path))])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["statistics"]["totalNodes"] == 3
        assert data["statistics"]["totalEdges"] == 2

    def test_output_file(self, tmp_path):
        out = tmp_path / "graph.json"
        result = CliRunner().invoke(
            cli, ["graph", str(_project(tmp_path / "p")), "-o", str(out), "--workers", "2"],
        )
        assert result.exit_code == 0, result.output
        assert "Wrote 3 node(s) and 2 edge(s)" in result.output
        assert json.loads(out.read_text(encoding="utf-8"))["statistics"]["circularCount"] == 1


class TestCyclesCommand:
    def test_reports_cycle(self, tmp_path):
        result = CliRunner().invoke(cli, ["cycles", str(_project(tmp_path))])
        assert result.exit_code == 0, result.output
        assert "Found 1 circular dependency" in result.output
        assert "a.ts -> b.ts -> a.ts" in result.output

    def test_no_cycles(self, tmp_path):
        _write(tmp_path, "a.ts", "import {b} from './b';\n")
        _write(tmp_path, "b.ts")
        result = CliRunner().invoke(cli, ["cycles", str(tmp_path)])
        assert result.exit_code == 0
        assert "No circular dependencies found." in result.output
