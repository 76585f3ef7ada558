"""Write the graph handoff as JSON."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from code_graph.analysis.graph_models import GraphData

FORMAT_VERSION = "1.0"


def graph_document(graph: GraphData, source_dir: Path) -> dict[str, Any]:
    """Wrap the graph in a small envelope identifying where it came from."""
    document: dict[str, Any] = {
        "version": FORMAT_VERSION,
        "generated": datetime.now().isoformat(),
        "source_directory": str(source_dir),
    }
    document.update(graph.to_dict())
    return document


def export_graph(graph: GraphData, output_path: Path, source_dir: Path) -> Path:
    """Write ``graph`` to ``output_path`` and return the path."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(graph_document(graph, source_dir), indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    return output_path
