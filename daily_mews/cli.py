"""
Command-line interface for The Daily Mews.

Uses Typer to provide a CLI with options for the main configuration
settings. Supports loading .env files, so FORCE_UPDATE can live there too.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
import logging

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from .config import AppConfig, is_force_requested, load_config
from .core.prng import date_seed
from .runner import local_now, run_pipeline
from .utils.logging import get_logger, log_event

app = typer.Typer(add_completion=False)
console = Console()
err_console = Console(stderr=True)


def _parse_at(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise typer.BadParameter(f"not an ISO 8601 timestamp: {value}") from exc


def _load(config: Path | None) -> AppConfig:
    return load_config(str(config) if config else None)


@app.command()
def run(
    output: Path | None = typer.Option(None, "--output", "-o", help="Site output directory."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
    force: bool | None = typer.Option(
        None,
        "--force/--no-force",
        help="Bypass the publish hour check (default: FORCE_UPDATE=1 in the environment).",
    ),
    at: str | None = typer.Option(
        None, "--at", help="Pin 'now' to an ISO 8601 timestamp; naive values use the configured zone."
    ),
    progress: bool = typer.Option(False, "--progress/--no-progress"),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log file format: jsonl or plain."
    ),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Publish today's page if this is the publishing hour.

    Runs outside the publishing hour exit 0 without touching the site.
    Any fetch or write failure exits 1.

    Args:
        output: Directory the site is written to
        config: Optional path to YAML config file
        force: Publish regardless of the local hour
        at: Timestamp to use instead of the current time
        progress: Whether to show a stage progress bar
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Log file format (jsonl, plain)
        log_file: Enable/disable file logging
    """
    load_dotenv()

    cfg = _load(config)

    # Override with CLI options
    if output is not None:
        cfg.output.site_dir = str(output)
    if log_level:
        cfg.logging.level = log_level
    if log_format:
        cfg.logging.format = log_format
    if log_file is not None:
        cfg.logging.file = log_file
    if force is None:
        force = is_force_requested(cfg.schedule)

    now = _parse_at(at)
    try:
        outcome = run_pipeline(cfg, now=now, force=force, show_progress=progress, console=console)
    except Exception as exc:  # noqa: BLE001
        log_event(
            get_logger(),
            "Pipeline failed",
            level=logging.ERROR,
            exc_info=exc,
            event="pipeline_failed",
            error=str(exc),
        )
        message = f"{type(exc).__name__}: {exc}"
        err_console.print(f"[red]{escape(message)}[/red]")
        raise typer.Exit(code=1) from exc

    if outcome.published:
        console.print(f"Site generated: {outcome.html_path}")


@app.command()
def seed(
    at: str | None = typer.Option(None, "--at", help="ISO 8601 timestamp (default: now)."),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, readable=True),
):
    """Print the date seed the build would use."""
    cfg = _load(config)
    now_local = local_now(cfg.schedule.timezone, _parse_at(at))
    console.print(f"{now_local.date().isoformat()} ({cfg.schedule.timezone}) seed={date_seed(now_local)}")


if __name__ == "__main__":
    app()
