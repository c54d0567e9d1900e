"""`strapi-import` command.

Creates entries on the target instance from the per-type files produced by
``strapi-export``, then prints per-type and total counts. Individual entry
failures are reported but do not change the exit status.

Environment:
- CLOUD_STRAPI_URL: target instance (default https://your-project.strapi.app)
- CLOUD_STRAPI_API_TOKEN: API token with create access (required)
- STRAPI_MIGRATE_BATCH_SIZE / STRAPI_MIGRATE_BATCH_DELAY: batching (10 / 0.5s)
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer

from strapi_migrate.cli._common import RULE, configure_logging, fail, load_cli_config
from strapi_migrate.exceptions import StrapiMigrateError
from strapi_migrate.export import ContentImporter
from strapi_migrate.models import ImportSummary

app = typer.Typer(
    name="strapi-import",
    add_completion=False,
    help="Import exported JSON files into a Strapi instance via the REST API.",
)


def render_summary(summary: ImportSummary) -> list[str]:
    """Format the end-of-run summary lines."""
    lines = [RULE, "Import Summary:", RULE]
    for content_type, result in summary.results.items():
        lines.append(f"{content_type}: {result.imported} imported, {result.failed} failed")
    lines.append(RULE)
    lines.append(f"Total: {summary.total_imported} imported, {summary.total_failed} failed")
    return lines


@app.command("import")
def import_(
    input_dir: Optional[Path] = typer.Option(
        None, "--input-dir", "-i", help="Directory holding export files."
    ),
    batch_size: Optional[int] = typer.Option(
        None, "--batch-size", "-b", help="Entries submitted concurrently per batch."
    ),
    batch_delay: Optional[float] = typer.Option(
        None, "--batch-delay", help="Pause between batches in seconds."
    ),
    target_url: Optional[str] = typer.Option(
        None, "--target-url", help="Target instance URL (overrides CLOUD_STRAPI_URL)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Import export files into the target instance."""
    configure_logging(verbose)
    config = load_cli_config(
        export_dir=input_dir,
        batch_size=batch_size,
        batch_delay=batch_delay,
        target_url=target_url,
    )

    typer.echo("Starting Strapi Data Import to Cloud...")
    typer.echo(f"Cloud URL: {config.target_url}")
    typer.echo(f"Input Directory: {config.export_dir}")

    if not config.get_target_token():
        fail("CLOUD_STRAPI_API_TOKEN environment variable is required")

    importer = ContentImporter(config)
    try:
        summary = asyncio.run(importer.import_all())
    except StrapiMigrateError as e:
        fail(str(e), ["   Run the export first: strapi-export"])

    for line in render_summary(summary):
        typer.echo(line)
    typer.echo("Import completed!")


def main() -> None:
    app()
