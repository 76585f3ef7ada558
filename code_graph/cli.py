"""Click CLI with scan, graph, and cycles subcommands."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from code_graph.analysis.graph_models import GraphData
from code_graph.exporter import export_graph, graph_document
from code_graph.models import Language, ScanConfig, ScanError
from code_graph.pipeline import run_scan

_LANGUAGE_CHOICES = [lang.value for lang in Language if lang is not Language.UNKNOWN]

_source_dir = click.argument(
    "source_dir", type=click.Path(exists=True, file_okay=False, path_type=Path), default=".",
)
_workers = click.option("--workers", "-w", default=1, show_default=True, help="Parallel extraction workers")
_verbose = click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")


def _run(source_dir: Path, workers: int, verbose: bool, quiet: bool = False) -> GraphData:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    def progress(stage: str, current: int, total: int):
        if total > 0:
            click.echo(f"  {stage}: {current}/{total}", nl=(current == total), err=True)

    config = ScanConfig(source_dir=source_dir, max_workers=max(1, workers))
    try:
        return run_scan(config, progress=None if quiet else progress)
    except ScanError as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """code-graph: Map file-level dependencies across a multi-language codebase."""


@cli.command()
@_source_dir
@click.option("--language", "-l", type=click.Choice(_LANGUAGE_CHOICES), help="Filter by language")
@_workers
@_verbose
def scan(source_dir: Path, language: str | None, workers: int, verbose: bool):
    """Scan a directory and list files with their dependency counts."""
    graph = _run(source_dir, workers, verbose)

    nodes = graph.nodes
    if language:
        nodes = [n for n in nodes if n.language.value == language]

    if not nodes:
        click.echo("No source files found.")
        return

    click.echo(f"\nFound {len(nodes)} file(s):\n")
    for node in nodes:
        name = click.style(node.id, fg="red" if node.is_circular else "cyan")
        click.echo(
            f"  {name}  "
            f"{click.style(node.language.value, dim=True)}  "
            f"out={node.dependency_count} in={node.dependent_count}"
        )

    summary = graph.summary
    click.echo("\nSummary:")
    click.echo(f"  files: {summary.total_nodes}")
    click.echo(f"  dependencies: {summary.total_edges}")
    click.echo(f"  languages: {', '.join(summary.languages)}")
    click.echo(f"  cycles: {summary.cycle_count}")
    click.echo(f"  max dependencies: {summary.max_dependencies}")
    click.echo(f"  max dependents: {summary.max_dependents}")


@cli.command()
@_source_dir
@click.option("-o", "--output", "output_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Write JSON to this file instead of stdout")
@_workers
@_verbose
def graph(source_dir: Path, output_path: Path | None, workers: int, verbose: bool):
    """Write the dependency graph as JSON."""
    data = _run(source_dir, workers, verbose, quiet=output_path is None)

    if output_path is None:
        click.echo(json.dumps(graph_document(data, source_dir), indent=2, ensure_ascii=False))
        return

    path = export_graph(data, output_path, source_dir)
    click.echo(
        f"Wrote {data.summary.total_nodes} node(s) and {data.summary.total_edges} edge(s) to {path}"
    )


@cli.command()
@_source_dir
@_workers
@_verbose
def cycles(source_dir: Path, workers: int, verbose: bool):
    """List circular dependencies."""
    data = _run(source_dir, workers, verbose, quiet=True)

    if not data.cycles:
        click.echo("No circular dependencies found.")
        return

    click.echo(f"Found {len(data.cycles)} circular dependenc{'y' if len(data.cycles) == 1 else 'ies'}:\n")
    for cycle in data.cycles:
        click.echo("  " + click.style(" -> ".join(cycle + cycle[:1]), fg="red"))


if __name__ == "__main__":
    cli()
