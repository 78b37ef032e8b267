"""CLI entry point for pandoc-export."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.syntax import Syntax
from rich.table import Table

from pandoc_export.commands import register_commands
from pandoc_export.config import AppConfig, ExportSettings, load_config, save_config
from pandoc_export.config.loader import CONFIG_FILENAME, DEFAULT_CONFIG_TEMPLATE
from pandoc_export.export import ExportContext, ExportState
from pandoc_export.features import can_export, detect_features
from pandoc_export.formats import OUTPUT_FORMATS, get_format
from pandoc_export.host import VaultHost
from pandoc_export.notify import ConsoleNotifier

app = typer.Typer(
    name="pandoc-export",
    help="Export vault notes to PDF, Word, HTML and more through Pandoc.",
)

config_app = typer.Typer(help="Manage pandoc-export configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: AppConfig | None = None
_config_path: str | None = None

_LOG_LEVELS = {"debug": logging.DEBUG, "info": logging.INFO, "warn": logging.WARNING, "error": logging.ERROR}


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _configure_logging(cfg: AppConfig) -> None:
    handler = logging.StreamHandler()
    if cfg.log_format == "json":
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logging.basicConfig(level=_LOG_LEVELS[cfg.log_level], handlers=[handler], force=True)


def _get_config() -> AppConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help=f"Path to {CONFIG_FILENAME}")
    ] = None,
) -> None:
    """Global options."""
    global _config, _config_path
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    _config_path = config
    _configure_logging(_config)


# ---------------------------------------------------------------------------
# Export
# ---------------------------------------------------------------------------


@app.command()
def export(
    note: str = typer.Argument(..., help="Note to export (path inside the vault)"),
    fmt: Annotated[str, typer.Option("--format", "-f", help="Output format, e.g. pdf, docx, html")] = "html",
    vault: Annotated[str, typer.Option("--vault", "-v", help="Vault root directory")] = ".",
    output_folder: Annotated[
        str | None, typer.Option("--output-folder", "-o", help="Write exports here instead of next to the note")
    ] = None,
    export_from: Annotated[
        str | None, typer.Option("--from", help="Content source: html or md")
    ] = None,
) -> None:
    """Export a note to another format."""
    cfg = _get_config()
    try:
        spec = get_format(fmt)
    except KeyError:
        rprint(f"[red]Error:[/red] Unknown format '{fmt}'. See `pandoc-export formats`.")
        raise typer.Exit(1)

    updates: dict[str, str] = {}
    if output_folder is not None:
        updates["output_folder"] = output_folder
    if export_from is not None:
        updates["export_from"] = export_from
    try:
        settings = ExportSettings(**{**cfg.export.model_dump(), **updates})
        host = VaultHost(vault, active=note)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    ctx = ExportContext.create(settings, host, ConsoleNotifier())
    command = register_commands(ctx).get("pandoc-export-" + spec.format.value)
    if not command.check(checking=True):
        rprint(f"[red]Error:[/red] Cannot export '{note}' as {spec.pretty_name}. Check `pandoc-export features`.")
        raise typer.Exit(1)

    result = asyncio.run(command.start())
    if result.state == ExportState.failed:
        raise typer.Exit(1)


@app.command()
def formats(
    note: Annotated[str | None, typer.Argument(help="Check eligibility for this note")] = None,
) -> None:
    """List output formats and whether each can be exported right now."""
    cfg = _get_config()
    features = detect_features(cfg.export)
    document = note or "note.md"

    table = Table(title=f"Output Formats ({len(OUTPUT_FORMATS)})")
    table.add_column("Format", style="cyan")
    table.add_column("Name")
    table.add_column("Extension", style="green")
    table.add_column("Available", justify="center")
    for spec in OUTPUT_FORMATS:
        ok = can_export(document, spec, features)
        table.add_row(spec.format.value, spec.pretty_name, spec.extension, "[green]yes[/green]" if ok else "[red]no[/red]")
    rprint(table)


@app.command()
def features() -> None:
    """Show which external binaries were found."""
    cfg = _get_config()
    detected = detect_features(cfg.export)

    table = Table(title="Capabilities")
    table.add_column("Capability", style="cyan")
    table.add_column("Path", style="green")
    for name in ("converter", "pdf-engine"):
        table.add_row(name, detected[name] or "[red]not found[/red]")
    rprint(table)


@app.command()
def commands(
    note: str = typer.Argument(..., help="Note the commands would act on"),
    vault: Annotated[str, typer.Option("--vault", "-v", help="Vault root directory")] = ".",
) -> None:
    """List the export commands enabled for a note."""
    cfg = _get_config()
    try:
        host = VaultHost(vault, active=note)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    registry = register_commands(ExportContext.create(cfg.export, host, ConsoleNotifier()))
    enabled = registry.available()
    if not enabled:
        rprint("[yellow]No export commands available for this note.[/yellow]")
        raise typer.Exit(0)
    for command in enabled:
        rprint(f"[cyan]{command.id}[/cyan]  {command.name}")


# ---------------------------------------------------------------------------
# Config commands
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False, sort_keys=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default pandoc-export.yaml in current directory."""
    target = Path(CONFIG_FILENAME)
    if target.exists() and not force:
        rprint(f"[yellow]{CONFIG_FILENAME} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Export setting, e.g. output_folder"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Change one export setting and save it."""
    cfg = _get_config()
    if key not in ExportSettings.model_fields:
        rprint(f"[red]Error:[/red] Unknown setting '{key}'")
        raise typer.Exit(1)
    try:
        settings = ExportSettings(**{**cfg.export.model_dump(), key: value})
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    target = save_config(cfg.model_copy(update={"export": settings}), _config_path or CONFIG_FILENAME)
    rprint(f"[green]Saved[/green] {key} to {target}")


if __name__ == "__main__":
    app()
