"""CLI commands for the Composer update reporter."""

from __future__ import annotations

import json
import logging
from typing import Any, Dict

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from update_reporter.notifications import (
    ConfigurationError,
    ConsoleOutput,
    Options,
    OutputBehavior,
    Reporter,
    ReportResult,
    Style,
    UpdateCheckResult,
    Verbosity,
)
from update_reporter.services import ConfigService

console = Console()
error_console = Console(stderr=True)

app = typer.Typer(
    help="Composer Update Reporter - Send update check results to your team"
)


def load_configuration(path: str) -> Dict[str, Any]:
    config_service = ConfigService(path)
    try:
        return config_service.load_reporter_configuration()
    except FileNotFoundError:
        # Services can still be configured through environment variables only
        return {}
    except (ValidationError, yaml.YAMLError, json.JSONDecodeError) as e:
        error_console.print(
            f"[red][ERROR] Invalid settings file {path}: {escape(str(e))}[/red]"
        )
        raise typer.Exit(code=2)


def load_result(result_file: typer.FileText) -> UpdateCheckResult:
    try:
        return UpdateCheckResult.from_payload(json.load(result_file))
    except ValueError as e:
        raise typer.BadParameter(
            f"Invalid update check result: {e}", param_hint="RESULT"
        ) from e


def print_summary(report: ReportResult) -> None:
    if not report.deliveries:
        console.print("[yellow][INFO] No notification service is enabled.[/yellow]")
        return
    for delivery in report.deliveries:
        if delivery.error is not None:
            console.print(
                f"[red][ERROR] {delivery.name}: {escape(str(delivery.error))}[/red]"
            )
        elif delivery.successful:
            console.print(f"[green][SUCCESS] {delivery.name}[/green]")
        else:
            console.print(f"[red][ERROR] {delivery.name}: report was rejected[/red]")


@app.command()
def report(
    result_file: typer.FileText = typer.Argument(
        ..., help="JSON output of the update check, '-' reads from stdin"
    ),
    config: str = typer.Option(
        "composer.json", "--config", "-c", help="Project settings file"
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Print a JSON summary instead of status lines"
    ),
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True, help="Increase verbosity (-vv for debug)"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print errors"),
) -> None:
    """Send the update check result to every enabled service."""
    result = load_result(result_file)

    if quiet:
        verbosity = Verbosity.QUIET
    else:
        verbosity = Verbosity(min(Verbosity.NORMAL + verbose, Verbosity.DEBUG))
    if verbosity >= Verbosity.DEBUG:
        logging.basicConfig(level=logging.DEBUG)

    reporter = Reporter(load_configuration(config))
    reporter.set_behavior(
        OutputBehavior(
            Style.JSON if json_output else Style.NORMAL,
            verbosity,
            ConsoleOutput(console, error_console),
        )
    )
    reporter.set_options(Options(json=json_output))

    try:
        outcome = reporter.report(result)
    except ConfigurationError as e:
        error_console.print(f"[red][ERROR] {escape(str(e))}[/red]")
        raise typer.Exit(code=2)

    if json_output:
        typer.echo(
            json.dumps(
                {
                    "successful": outcome.successful,
                    "services": [
                        {
                            "name": delivery.name,
                            "successful": delivery.successful,
                            "error": str(delivery.error) if delivery.error else None,
                        }
                        for delivery in outcome.deliveries
                    ],
                }
            )
        )
    elif verbosity > Verbosity.QUIET:
        print_summary(outcome)

    if not outcome.successful:
        raise typer.Exit(code=1)


@app.command()
def services(
    config: str = typer.Option(
        "composer.json", "--config", "-c", help="Project settings file"
    ),
) -> None:
    """List the registered services and whether they are enabled."""
    reporter = Reporter(load_configuration(config))
    enabled = reporter.enabled_services()
    for service in reporter.services:
        if service in enabled:
            console.print(f"[green]✓ {service.name} ({service.config_key})[/green]")
        else:
            console.print(f"[yellow]- {service.name} ({service.config_key})[/yellow]")


__all__ = ["app", "report", "services"]
