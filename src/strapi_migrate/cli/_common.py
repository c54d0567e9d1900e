"""Helpers shared by the export and import commands."""

from __future__ import annotations

import logging
from typing import Any, NoReturn

import typer

from strapi_migrate.config import MigrationConfig, load_config
from strapi_migrate.exceptions import ConfigurationError

RULE = "=" * 50


def configure_logging(verbose: bool) -> None:
    """Send library logs to stderr at INFO (or DEBUG when verbose)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # Per-request lines from httpx are noise unless debugging.
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def load_cli_config(**overrides: Any) -> MigrationConfig:
    """Load configuration, exiting with status 1 when it is invalid."""
    try:
        return load_config(**overrides)
    except ConfigurationError as e:
        fail(str(e))


def fail(message: str, hints: list[str] | None = None) -> NoReturn:
    """Print an error (and optional hints) and exit with status 1."""
    typer.echo(f"Error: {message}", err=True)
    for hint in hints or []:
        typer.echo(hint, err=True)
    raise typer.Exit(code=1)
