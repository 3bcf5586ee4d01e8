from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from polypost.core.config import PolypostConfig
from polypost.core.config_loader import ConfigLoader
from polypost.core.exceptions import DataFetchError, PolypostError
from polypost.core.logging import setup_logging
from polypost.core.paths import LOGS_DIR
from polypost.engine.pipeline import BuildPipeline, group_documents
from polypost.infra.content import FilesystemContentSource
from polypost.infra.sinks.json import JsonRouteSink

app = typer.Typer(name="polypost", help="Polypost - multilingual blog route builder")

console = Console()


def _load_config(site_root: Path) -> PolypostConfig:
    try:
        return ConfigLoader(site_root).load()
    except PolypostError as exc:
        console.print(f"[bold red]Configuration error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


@app.command()
def build(
    site_root: Path = typer.Argument(Path("."), help="Root directory of the site."),
    out: Path | None = typer.Option(None, "--out", help="Where to write the route table JSON."),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level."),
    log_to_file: bool = typer.Option(False, "--log-to-file", help="Also write logs under the app data dir."),
):
    """
    Build the route table for every post and language index.
    """
    try:
        setup_logging(log_level, LOGS_DIR / "polypost.log" if log_to_file else None)
    except ValueError as exc:
        console.print(f"[bold red]Invalid --log-level:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    config = _load_config(site_root)
    output_path = out if out is not None else config.paths.abs_output_path

    source = FilesystemContentSource(config.paths.abs_content_dir, config.i18n)
    pipeline = BuildPipeline(config, source, JsonRouteSink(output_path))
    try:
        table = pipeline.run()
    except DataFetchError as exc:
        console.print("[bold red]Content query failed:[/]")
        for error in exc.errors:
            console.print(f"  - {escape(error)}", soft_wrap=True)
        raise typer.Exit(code=1) from exc

    summary = Table(title="Route table")
    summary.add_column("Kind", style="bold cyan")
    summary.add_column("Routes", justify="right")
    summary.add_row("index", str(len(table.index_routes)))
    summary.add_row("post", str(len(table.post_routes)))
    console.print(summary)
    console.print(f"Route table written to: {output_path}")


@app.command()
def languages(site_root: Path = typer.Argument(Path("."), help="Root directory of the site.")):
    """
    List the supported languages and their index paths.
    """
    config = _load_config(site_root)

    table = Table(title="Supported languages")
    table.add_column("Code", style="bold cyan")
    table.add_column("Name")
    table.add_column("Locale")
    table.add_column("Index path")
    for code, language in config.i18n.languages.items():
        marker = " (canonical)" if config.i18n.is_canonical(code) else ""
        table.add_row(code + marker, language.name, language.locale or "-", config.i18n.index_path(code))
    console.print(table)


@app.command()
def groups(site_root: Path = typer.Argument(Path("."), help="Root directory of the site.")):
    """
    Show every post directory and the languages it is translated into.
    """
    config = _load_config(site_root)
    result = FilesystemContentSource(config.paths.abs_content_dir, config.i18n).query()
    if result.errors:
        console.print(f"[bold yellow]{len(result.errors)} document(s) could not be loaded[/]")

    table = Table(title="Translation groups")
    table.add_column("Directory", style="bold cyan")
    table.add_column("Translations")
    for group_key, group in sorted(group_documents(result.documents, config.i18n).items()):
        table.add_row(group_key, ", ".join(group.translations))
    console.print(table)


if __name__ == "__main__":
    app()
