#!/usr/bin/env python3
"""Export and import in one run

Copies a handful of content types from a local Strapi instance to Strapi
Cloud without going through the two command line tools.

Usage:
    1. Set LOCAL_STRAPI_URL / STRAPI_API_TOKEN for the source instance
    2. Set CLOUD_STRAPI_URL / CLOUD_STRAPI_API_TOKEN for the target instance
    3. Update CONTENT_TYPES with your content types
    4. Run: python migrate_in_one_run.py
"""

import asyncio
import logging
from datetime import datetime

from strapi_migrate import ContentExporter, ContentImporter, StrapiMigrateError, load_config

CONTENT_TYPES = [
    "article",
    "author",
    "category",
]


async def migrate() -> None:
    """Export CONTENT_TYPES from the source and import them into the target."""
    run_id = datetime.now().strftime("%Y%m%d_%H%M%S")
    config = load_config(export_dir=f"./migration_{run_id}")

    print(f"Exporting from {config.source_url}...")
    bundle = await ContentExporter(config).export_all(CONTENT_TYPES)
    print(f"  Exported {bundle.total_entries()} entries to {config.export_dir}")

    print(f"\nImporting to {config.target_url}...")
    summary = await ContentImporter(config).import_all()
    for content_type, result in summary.results.items():
        print(f"  {content_type}: {result.imported} imported, {result.failed} failed")

    if summary.total_failed:
        print(f"\n{summary.total_failed} entries failed - files kept in {config.export_dir}")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    print("Starting Strapi Migration")
    print("=" * 60)

    try:
        asyncio.run(migrate())
    except StrapiMigrateError as e:
        print(f"Migration failed: {e}")
        return

    print("\nMigration complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
