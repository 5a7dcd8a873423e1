# src/blockstyle/cli.py
"""
blockstyle Command Line Interface (CLI).

This module implements the terminal interface using `typer` and `rich`.

Features
--------
- **Findings Table**: Every offending doc block with its file, position and rule.
- **Fix Mode**: Rewrites files in place with the engine's fixes.
- **Config Layers**: Defaults, then a JSON options file (``--config`` or
  ``BLOCKSTYLE_CONFIG``), then individual ``--option key=value`` overrides.

Exit Codes
----------
- 0: no findings left.
- 1: findings remain (not fixed, or not fixable).
- 2: bad usage or invalid configuration.

Usage
-----
    $ blockstyle check src/app.js src/util.js
    $ blockstyle check src/app.js --fix -O noMultilineBlocks=true
    $ blockstyle show-config --config .blockstyle.json
"""

from __future__ import annotations

import json
import traceback
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from pydantic.alias_generators import to_camel
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from blockstyle.core.contracts.options import BlockStyleOptions, load_options
from blockstyle.core.contracts.report import Finding
from blockstyle.core.settings import load_settings
from blockstyle.pipelines.lint_source import run_pipeline

load_dotenv()

app = typer.Typer(
    help="blockstyle: single-line / multi-line policy for doc comment blocks.",
    rich_markup_mode="markdown",
)
console = Console()


# --------------------------------------------------------------------------- #
# Helpers: Configuration
# --------------------------------------------------------------------------- #


def _parse_override(raw: str) -> tuple[str, Any]:
    """Split ``key=value``; the value is read as JSON, else kept as a string."""
    key, sep, value = raw.partition("=")
    if not sep or not key.strip():
        raise ValueError(f"Option override must look like key=value, got {raw!r}")
    try:
        parsed: Any = json.loads(value)
    except json.JSONDecodeError:
        parsed = value
    return key.strip(), parsed


def _resolve_options(config: Path | None, overrides: list[str] | None) -> BlockStyleOptions:
    """Layer defaults, the options file and ``--option`` overrides."""
    path = config if config is not None else load_settings().config_path
    base = load_options(path) if path is not None else BlockStyleOptions()
    if not overrides:
        return base

    data = base.model_dump(by_alias=True)
    for raw in overrides:
        key, value = _parse_override(raw)
        data[to_camel(key) if "_" in key else key] = value
    return BlockStyleOptions.model_validate(data)


def _options_or_exit(config: Path | None, overrides: list[str] | None) -> BlockStyleOptions:
    try:
        return _resolve_options(config, overrides)
    except (OSError, ValueError, ValidationError) as e:
        console.print(f"[bold red]Invalid configuration:[/bold red] {e}")
        raise typer.Exit(code=2) from e


# --------------------------------------------------------------------------- #
# Helpers: Rendering
# --------------------------------------------------------------------------- #


def _render_findings(rows: list[tuple[Path, Finding]]) -> None:
    """Print findings as a table, one row per offending block."""
    table = Table(title="Doc block findings", show_lines=False)
    table.add_column("File", style="cyan")
    table.add_column("Line", justify="right")
    table.add_column("Col", justify="right")
    table.add_column("Rule", style="magenta")
    table.add_column("Message")
    table.add_column("Fixed", justify="center")

    for path, finding in rows:
        status = "yes" if finding.fixed else ("-" if not finding.fixable else "no")
        table.add_row(
            str(path),
            str(finding.line),
            str(finding.column),
            finding.kind,
            finding.message,
            status,
        )
    console.print(table)


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def check(
    files: Annotated[
        list[Path],
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Source files to check.",
        ),
    ],
    fix: Annotated[
        bool,
        typer.Option("--fix", help="Rewrite files in place with the available fixes."),
    ] = False,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            exists=True,
            dir_okay=False,
            help="JSON options file (defaults to $BLOCKSTYLE_CONFIG).",
        ),
    ] = None,
    option: Annotated[
        list[str] | None,
        typer.Option(
            "--option",
            "-O",
            help="Override one option, e.g. `-O noSingleLineBlocks=true`.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show full error tracebacks for debugging."),
    ] = False,
) -> None:
    """
    Check doc blocks in the given files (and optionally fix them).
    """
    options = _options_or_exit(config, option)

    rows: list[tuple[Path, Finding]] = []
    for path in files:
        try:
            source = path.read_text(encoding="utf-8")
            result = run_pipeline(source, options, fix=fix)
            if fix and result["fixes_applied"] and result["fixed_source"] is not None:
                path.write_text(result["fixed_source"], encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            console.print(f"[bold red]Cannot process {path}:[/bold red] {e}")
            if verbose:
                traceback.print_exc()
            raise typer.Exit(code=2) from e
        rows.extend((path, finding) for finding in result["findings"])

    if not rows:
        console.print(f"[bold green]No findings[/bold green] in {len(files)} file(s).")
        return

    _render_findings(rows)
    remaining = sum(1 for _, finding in rows if not finding.fixed)
    fixed = len(rows) - remaining
    console.print(
        Panel.fit(
            f"{len(rows)} finding(s), {fixed} fixed, {remaining} remaining",
            border_style="red" if remaining else "green",
        )
    )
    if remaining:
        raise typer.Exit(code=1)


@app.command("show-config")  # type: ignore[misc]
def show_config(
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            exists=True,
            dir_okay=False,
            help="JSON options file (defaults to $BLOCKSTYLE_CONFIG).",
        ),
    ] = None,
    option: Annotated[
        list[str] | None,
        typer.Option("--option", "-O", help="Override one option."),
    ] = None,
) -> None:
    """
    Print the effective rule options as JSON.
    """
    options = _options_or_exit(config, option)
    console.print_json(options.model_dump_json(by_alias=True))


if __name__ == "__main__":
    app()
