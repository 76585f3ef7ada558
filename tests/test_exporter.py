"""Tests for the JSON exporter."""

import json
from pathlib import Path

from code_graph.exporter import export_graph, graph_document
from code_graph.models import ScanConfig
from code_graph.pipeline import run_scan


def _write(root: Path, rel: str, text: str = "") -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def _graph(root: Path):
    _write(root, "a.ts", "import {b} from './b';\n")
    _write(root, "b.ts", "import {a} from './a';\n")
    return run_scan(ScanConfig(source_dir=root))


def test_graph_document_envelope(tmp_path):
    graph = _graph(tmp_path / "project")
    doc = graph_document(graph, tmp_path / "project")

    assert doc["version"] == "1.0"
    assert doc["source_directory"] == str(tmp_path / "project")
    assert "generated" in doc
    assert len(doc["nodes"]) == 2
    assert doc["statistics"]["circularCount"] == 1
    assert sorted(doc["circularDependencies"][0]) == ["a.ts", "b.ts"]


def test_export_graph_writes_json(tmp_path):
    graph = _graph(tmp_path / "project")
    out = export_graph(graph, tmp_path / "out" / "graph.json", tmp_path / "project")

    assert out.exists()
    data = json.loads(out.read_text(encoding="utf-8"))
    assert {e["from"] for e in data["edges"]} == {"a.ts", "b.ts"}
    assert data["edges"][0]["title"] == "a.ts → b.ts (import)"
    assert all(n["isCircular"] for n in data["nodes"])
