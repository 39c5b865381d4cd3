"""CLI entry point for refcheck."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from refcheck.config import RefcheckConfig, load_config
from refcheck.config.loader import DEFAULT_CONFIG_TEMPLATE
from refcheck.errors import ConfigurationError, RootWalkError
from refcheck.exclusion import DEFAULT_TEMPLATES, merge_templates
from refcheck.log import setup_logging
from refcheck.output import render_reports, reports_to_json
from refcheck.validator import check_folders

app = typer.Typer(
    name="refcheck",
    help=(
        "Check the integrity of content-addressed files: every file name is "
        "expected to be the SHA-256 digest of the file's content."
    ),
)

config_app = typer.Typer(help="Manage refcheck configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: RefcheckConfig | None = None


def _get_config() -> RefcheckConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to refcheck.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ConfigurationError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    setup_logging(_config.log_level, _config.log_format)


def read_paths_file(paths_file: Path) -> list[str]:
    """Read folder paths, one per line. Blank lines and # comments are skipped."""
    try:
        lines = paths_file.read_text(encoding="utf-8").splitlines()
    except OSError as e:
        raise ConfigurationError(f"Cannot read paths file {paths_file}: {e}") from e
    paths = []
    for line in lines:
        line = line.strip()
        if line and not line.startswith("#"):
            paths.append(line)
    return paths


def _collect_folder_paths(paths: list[str] | None, paths_files: list[Path] | None) -> list[str]:
    """Command-line paths first, then paths-file entries; '.' when none given."""
    folders = list(paths or [])
    for pf in paths_files or []:
        folders.extend(read_paths_file(pf))
    if not folders and not paths_files:
        folders = ["."]
    return folders


@app.command()
def check(
    paths: Annotated[
        list[str] | None, typer.Argument(help="Folders to check (default: current directory)")
    ] = None,
    paths_file: Annotated[
        list[Path] | None,
        typer.Option("--paths-file", help="File listing folder paths, one per line. Repeatable."),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", "-e", help="Regex excluding matching file paths. Repeatable."),
    ] = None,
    template: Annotated[
        list[str] | None,
        typer.Option("--template", "-t", help="Exclusion template name. Repeatable."),
    ] = None,
    no_templates: Annotated[
        bool, typer.Option("--no-templates", help="Disable all exclusion templates")
    ] = False,
    workers: Annotated[
        int | None, typer.Option("--workers", "-w", help="Concurrent workers per folder")
    ] = None,
    json_output: Annotated[
        bool, typer.Option("--json", "-j", help="Print results as JSON")
    ] = False,
    fail_on_corrupted: Annotated[
        bool,
        typer.Option("--fail-on-corrupted", help="Exit 1 if any file is corrupted, invalid or unreadable"),
    ] = False,
) -> None:
    """Verify that every file's name matches the SHA-256 digest of its content."""
    cfg = _get_config()

    overrides: dict = {}
    if exclude:
        overrides["exclude"] = [*cfg.exclude, *exclude]
    if no_templates:
        overrides["templates"] = []
    elif template:
        overrides["templates"] = template
    if workers is not None:
        overrides["workers"] = workers
    run_cfg = cfg.model_copy(update=overrides)

    try:
        folders = _collect_folder_paths(paths, paths_file)
        reports = check_folders(folders, run_cfg)
    except (ConfigurationError, RootWalkError) as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if json_output or run_cfg.output.format == "json":
        typer.echo(reports_to_json(reports))
    else:
        render_reports(reports)

    should_fail = fail_on_corrupted or run_cfg.output.fail_on_corrupted
    if should_fail and not all(r.is_clean for r in reports):
        raise typer.Exit(code=1)


@app.command()
def templates() -> None:
    """List the available exclusion templates."""
    cfg = _get_config()
    merged = merge_templates(DEFAULT_TEMPLATES, cfg.custom_templates)

    table = Table(title=f"Exclusion Templates ({len(merged)})")
    table.add_column("Name", style="cyan")
    table.add_column("Default", justify="center")
    table.add_column("Patterns", style="green")
    for name in sorted(merged):
        enabled = "yes" if name in cfg.templates else "-"
        patterns = ", ".join(merged[name]) or "(none)"
        table.add_row(name, enabled, escape(patterns))
    rprint(table)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default refcheck.yaml in current directory."""
    target = Path("refcheck.yaml")
    if target.exists() and not force:
        rprint("[yellow]refcheck.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")


if __name__ == "__main__":
    app()
