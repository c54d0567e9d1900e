"""`strapi-export` command.

Exports every configured content type from the source instance to
``<output-dir>/<type>.json`` and writes a combined ``all-content.json``.

Environment:
- LOCAL_STRAPI_URL: source instance (default http://localhost:1337)
- STRAPI_API_TOKEN: API token with read access (required)
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional

import typer

from strapi_migrate.cli._common import configure_logging, fail, load_cli_config
from strapi_migrate.exceptions import StrapiMigrateError
from strapi_migrate.export import DEFAULT_CONTENT_TYPES, ContentExporter

TOKEN_HINTS = [
    "",
    "To create an API token:",
    "   1. Go to your Strapi Admin Panel",
    "   2. Settings > API Tokens",
    '   3. Create a new token with "Read" permissions',
    "   4. Set it as: export STRAPI_API_TOKEN=your-token-here",
]

app = typer.Typer(
    name="strapi-export",
    add_completion=False,
    help="Export Strapi content to JSON files via the REST API.",
)


@app.command()
def export(
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Directory to write export files to."
    ),
    content_types: Optional[List[str]] = typer.Option(
        None,
        "--content-type",
        "-t",
        help="Content type API name to export (repeatable). Defaults to the built-in list.",
    ),
    source_url: Optional[str] = typer.Option(
        None, "--source-url", help="Source instance URL (overrides LOCAL_STRAPI_URL)."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Export content types from the source instance."""
    configure_logging(verbose)
    config = load_cli_config(source_url=source_url, export_dir=output_dir)

    typer.echo("Starting Strapi Data Export...")
    typer.echo(f"Local URL: {config.source_url}")
    typer.echo(f"Output Directory: {config.export_dir}")

    if not config.get_source_token():
        fail("STRAPI_API_TOKEN environment variable is required", TOKEN_HINTS)

    exporter = ContentExporter(config)
    try:
        bundle = asyncio.run(exporter.export_all(content_types or DEFAULT_CONTENT_TYPES))
    except StrapiMigrateError as e:
        fail(str(e))

    exported = ", ".join(
        f"{name} ({bundle.entry_count(name)})" for name in bundle.content_types
    )
    typer.echo(f"Exported content types: {exported or 'none'}")
    typer.echo("Export completed!")
    typer.echo("")
    typer.echo("Next steps:")
    typer.echo(f"   1. Review the exported files in: {config.export_dir}")
    typer.echo("   2. Run strapi-import to upload them to Strapi Cloud")
    typer.echo("   3. Or use Strapi CLI: yarn strapi export --no-encrypt")


def main() -> None:
    app()
