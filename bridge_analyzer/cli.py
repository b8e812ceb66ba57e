"""Typer-based CLI for the bridge analyzer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Sequence

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from . import __version__, config
from .graph import analyze
from .models import AnalysisRequest, AnalysisResult, GraphNode
from .snapshot import load_snapshot

app = typer.Typer(
    help="🔗 Bridge analyzer — dependency maps for a single source file.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"bridge-analyzer v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """Bridge analyzer: imports, exports, dependencies and dependents of a file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _node_table(title: str, nodes: Sequence[GraphNode], limit: int) -> Table:
    table = Table(title=title, show_header=True, show_lines=False)
    table.add_column("Importance", justify="right", style="bold")
    table.add_column("Path", style="cyan")
    table.add_column("Type")
    table.add_column("Language")
    table.add_column("Exports", justify="right")

    for node in nodes[:limit]:
        table.add_row(
            str(node.importance),
            node.path,
            node.type,
            node.language,
            str(len(node.exports)),
        )
    return table


def _print_result(result: AnalysisResult, limit: int) -> None:
    source = result.source_file
    lines = [
        f"[bold]{source.name}[/bold]  ({source.type}, {source.language})",
        f"Importance: {source.importance}",
        f"Exports: {', '.join(source.exports) or '—'}",
        f"Nodes: {result.total_nodes} | Edges: {result.total_edges}",
    ]
    console.print(Panel("\n".join(lines), title=source.path, border_style="green"))

    if source.dependencies:
        imports = Table(title="Imports", show_header=True)
        imports.add_column("Line", justify="right")
        imports.add_column("Kind")
        imports.add_column("Target", style="cyan")
        imports.add_column("Names")
        imports.add_column("External")
        for link in source.dependencies:
            imports.add_row(
                str(link.line_number),
                link.import_type,
                link.target_path,
                ", ".join(link.import_names),
                "yes" if link.is_external else "",
            )
        console.print(imports)

    console.print(_node_table("Dependencies", result.dependencies, limit))
    console.print(_node_table("Dependents", result.dependents, limit))


@app.command("analyze")
def analyze_command(
    repo_path: Path = typer.Argument(..., exists=True, file_okay=False, help="Repository checkout root."),
    file_path: str = typer.Argument(..., help="Target file, relative to the repository root."),
    no_snapshot: bool = typer.Option(False, "--no-snapshot", help="Analyze the file alone, without the repository."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response."),
    limit: int = typer.Option(20, "--limit", "-n", min=1, help="Maximum rows per table."),
):
    """Analyze FILE_PATH inside REPO_PATH and print its dependency map."""
    root = repo_path.resolve()
    target = (root / file_path).resolve()
    if not target.is_file() or root not in target.parents:
        raise typer.BadParameter(f"'{file_path}' is not a file inside {root}.")
    try:
        content = target.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read '{file_path}': {exc}")

    rel_path = target.relative_to(root).as_posix()
    repo_files = None if no_snapshot else load_snapshot(root)

    result = analyze(AnalysisRequest(
        file_path=rel_path,
        file_content=content,
        repo_files=repo_files,
        repo=root.name,
    ))

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return
    _print_result(result, limit)


@app.command("serve")
def serve_command(
    host: str = typer.Option(config.HOST, "--host", help="Interface to bind."),
    port: int = typer.Option(config.PORT, "--port", "-p", help="Port for the HTTP server."),
):
    """Run the HTTP analysis server."""
    from .server import ANALYZE_PATH, run

    console.print("\n[bold green]🔗 Bridge analyzer[/bold green]")
    console.print(f"   Endpoint: http://{host}:{port}{ANALYZE_PATH}")
    console.print("\n   [dim]Press Ctrl+C to stop the server[/dim]\n")
    try:
        run(host, port)
    except KeyboardInterrupt:
        pass
    finally:
        console.print("\n[dim]Server stopped.[/dim]")


if __name__ == "__main__":
    app()
