"""CLI entry point for xmlmatch."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer
import yaml
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from xmlmatch_core.config import DEFAULT_CONFIG_TEMPLATE, XmlMatchConfig, load_config
from xmlmatch_core.documents import DocumentLoadError, load_document
from xmlmatch_core.fingerprint import DepthLimitExceededError, node_key
from xmlmatch_core.keys import format_key, key_mask
from xmlmatch_core.matcher import compare_documents
from xmlmatch_core.suite import SuiteRunner

app = typer.Typer(
    name="xmlmatch",
    help="Compare XML documents ignoring attribute and sibling order.",
)

config_app = typer.Typer(help="Manage xmlmatch configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: XmlMatchConfig | None = None

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(
            {
                "time": self.formatTime(record, "%Y-%m-%d %H:%M:%S"),
                "level": record.levelname,
                "logger": record.name,
                "message": record.getMessage(),
            }
        )


def _configure_logging(cfg: XmlMatchConfig) -> None:
    if cfg.log_format == "json":
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
    logging.basicConfig(level=_LOG_LEVELS[cfg.log_level], handlers=[handler], force=True)


def _get_config() -> XmlMatchConfig:
    if _config is None:
        return load_config()
    return _config


def _fail(message: str) -> NoReturn:
    rprint(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


def _resolve_width(width: int | None, cfg: XmlMatchConfig) -> int:
    width = width if width is not None else cfg.keys.width
    try:
        key_mask(width)
    except ValueError as e:
        _fail(str(e))
    return width


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to xmlmatch.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        _fail(str(e))
    _configure_logging(_config)


@app.command()
def compare(
    lhs: Annotated[str, typer.Argument(help="First XML file")],
    rhs: Annotated[str, typer.Argument(help="Second XML file")],
    confirm: Annotated[
        bool | None,
        typer.Option("--confirm/--no-confirm", help="Re-check equal keys structurally"),
    ] = None,
    width: Annotated[int | None, typer.Option("--width", help="Key width in bits")] = None,
    ci: Annotated[bool, typer.Option("--ci", help="Machine-readable output")] = False,
) -> None:
    """Compare two XML files, ignoring attribute and sibling order."""
    cfg = _get_config()
    width = _resolve_width(width, cfg)
    settings = cfg.match
    if confirm is not None:
        settings = settings.model_copy(update={"confirm_matches": confirm})

    try:
        lhs_doc = load_document(lhs, settings=cfg.parser)
        rhs_doc = load_document(rhs, settings=cfg.parser)
        result = compare_documents(lhs_doc, rhs_doc, width=width, settings=settings)
    except (DocumentLoadError, DepthLimitExceededError) as e:
        _fail(str(e))

    lhs_hex = format_key(result.lhs_key, width)
    rhs_hex = format_key(result.rhs_key, width)
    if ci:
        typer.echo("EQUIVALENT" if result.equivalent else "DIFFERENT")
        typer.echo(f"lhs_key={lhs_hex}")
        typer.echo(f"rhs_key={rhs_hex}")
        if result.collision:
            typer.echo("collision=true")
    else:
        rprint(f"[dim]{escape(lhs)}:[/dim] {lhs_hex}")
        rprint(f"[dim]{escape(rhs)}:[/dim] {rhs_hex}")
        if result.collision:
            rprint("[yellow]Keys collide but the documents differ structurally.[/yellow]")
        if result.equivalent:
            suffix = " (confirmed)" if result.confirmed else ""
            rprint(f"\n[green]Documents are equivalent{suffix}.[/green]")
        else:
            rprint("\n[red]Documents differ.[/red]")

    if not result.equivalent:
        raise typer.Exit(code=1)


@app.command()
def key(
    paths: Annotated[list[str], typer.Argument(help="XML files to fingerprint")],
    width: Annotated[int | None, typer.Option("--width", help="Key width in bits")] = None,
) -> None:
    """Print the structural fingerprint of each XML file."""
    cfg = _get_config()
    width = _resolve_width(width, cfg)
    for path in paths:
        try:
            doc = load_document(path, settings=cfg.parser)
            value = node_key(doc.root, width=width, max_depth=cfg.match.max_depth)
        except (DocumentLoadError, DepthLimitExceededError) as e:
            _fail(str(e))
        typer.echo(f"{format_key(value, width)}  {path}")


@app.command()
def suite(
    data_dir: Annotated[
        str | None, typer.Option("--data-dir", help="Directory holding the case files")
    ] = None,
    ci: Annotated[bool, typer.Option("--ci", help="Machine-readable output")] = False,
) -> None:
    """Run the configured pair cases and report PASSED/FAILED for each."""
    cfg = _get_config()
    runner = SuiteRunner(cfg, Path(data_dir) if data_dir else None)
    try:
        results = runner.run()
    except (DocumentLoadError, DepthLimitExceededError) as e:
        _fail(str(e))

    if ci:
        for r in results:
            typer.echo(f"{r.label} ---> {'PASSED' if r.passed else 'FAILED'}")
    else:
        table = Table(title=f"Match Suite ({runner.data_dir})")
        table.add_column("Case", style="cyan")
        table.add_column("Status", justify="center")
        table.add_column("Detail", style="dim")
        for r in results:
            status = "[green]PASSED[/green]" if r.passed else "[red]FAILED[/red]"
            detail = r.error or ""
            table.add_row(escape(r.label), status, escape(detail))
        rprint(table)

    failed = [r for r in results if not r.passed]
    if not ci:
        if failed:
            rprint(f"\n[red]{len(failed)} of {len(results)} case(s) failed.[/red]")
        else:
            rprint(f"\n[green]All {len(results)} case(s) passed.[/green]")
    if failed:
        raise typer.Exit(code=1)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default xmlmatch.yaml in current directory."""
    target = Path("xmlmatch.yaml")
    if target.exists() and not force:
        rprint("[yellow]xmlmatch.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
