# src/mockwire/cli.py
"""CLI for inspecting mockwire configuration.

Usage:
    # List bundled presets
    mockwire presets

    # Show the configuration a test run would use
    mockwire config --preset=async --assertion-time-ms=5000
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer
import yaml
from pydantic import ValidationError

from mockwire.config import list_presets, load_config
from mockwire.contracts.enums import OrderingType
from mockwire.core.logging import configure_logging, get_logger

logger = get_logger(__name__)

app = typer.Typer(
    name="mockwire",
    help="Mockwire: declarative mock expectations for message-driven integration tests.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        from mockwire import __version__

        typer.echo(f"mockwire {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Mockwire: declarative mock expectations for message-driven integration tests."""


@app.command()
def presets() -> None:
    """List available configuration presets."""
    names = list_presets()
    if not names:
        typer.echo("No presets available.")
        return
    typer.echo("Available presets:")
    for name in names:
        typer.echo(f"  - {name}")


@app.command()
def config(
    preset: Annotated[
        str | None,
        typer.Option(
            "--preset",
            "-p",
            help="Preset configuration to use. Use 'mockwire presets' to list available presets.",
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to YAML configuration file.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    ordering: Annotated[
        OrderingType | None,
        typer.Option(
            "--ordering",
            help="Default ordering type for expectation parts.",
            case_sensitive=False,
        ),
    ] = None,
    assertion_time_ms: Annotated[
        int | None,
        typer.Option(
            "--assertion-time-ms",
            help="Default assertion time in milliseconds.",
            min=1,
        ),
    ] = None,
) -> None:
    """Print the resolved configuration as JSON."""
    expectations: dict[str, Any] = {}
    if ordering is not None:
        expectations["ordering"] = ordering.value
    if assertion_time_ms is not None:
        expectations["assertion_time_ms"] = assertion_time_ms
    overrides = {"expectations": expectations} if expectations else None

    try:
        resolved = load_config(preset=preset, config_file=config_file, overrides=overrides)
    except FileNotFoundError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from None
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        typer.secho(f"Invalid configuration: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from None

    configure_logging(json_output=resolved.logging.json_output, level=resolved.logging.level)
    logger.debug("config_resolved", preset=resolved.preset_name, config_file=str(config_file) if config_file else None)

    typer.echo(json.dumps(resolved.model_dump(mode="json"), indent=2))


def main() -> None:
    """Entry point for mockwire CLI."""
    app()


if __name__ == "__main__":
    main()
