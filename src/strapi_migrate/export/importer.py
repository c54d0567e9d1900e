"""Import orchestration for exported Strapi content.

Replays per-type export files against a target instance as creation
requests. Entries go out in fixed-size batches: every entry of a batch is
submitted concurrently, the whole batch is awaited, and a fixed pause
separates consecutive batches.
"""

import asyncio
import json
import logging
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

import httpx

from strapi_migrate.client import StrapiRequester
from strapi_migrate.config import MigrationConfig
from strapi_migrate.exceptions import ImportExportError
from strapi_migrate.export.exporter import COMBINED_FILENAME
from strapi_migrate.models import ImportResult, ImportSummary
from strapi_migrate.utils import batch_count, chunked, strip_source_fields

logger = logging.getLogger(__name__)

SUCCESS_STATUSES = frozenset({200, 201})


class ContentImporter:
    """Import exported content types into a target instance.

    Failed entries are counted and logged but never retried, and entries
    already created are not rolled back when a sibling fails.

    Example:
        >>> import asyncio
        >>> from strapi_migrate import ContentImporter, load_config
        >>>
        >>> importer = ContentImporter(load_config(batch_size=20))
        >>> summary = asyncio.run(importer.import_all())
        >>> print(f"{summary.total_imported} imported, {summary.total_failed} failed")
    """

    def __init__(
        self,
        config: MigrationConfig,
        *,
        http_client: httpx.AsyncClient | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        """Initialize importer.

        Args:
            config: Migration settings (target URL/token, batch size and delay)
            http_client: Optional preconfigured HTTP client for requests
            sleep: Coroutine used for the pause between batches
        """
        self.config = config
        self._http_client = http_client
        self._sleep = sleep

    @staticmethod
    def discover_content_types(input_dir: Path | str) -> list[str]:
        """List content types with an export file in ``input_dir``.

        Every ``*.json`` file except the combined bundle counts; the content
        type name is the file stem.

        Args:
            input_dir: Directory holding export files

        Returns:
            Content type names, sorted

        Raises:
            ImportExportError: If the directory is missing or holds no export files
        """
        directory = Path(input_dir)
        if not directory.is_dir():
            raise ImportExportError(f"Input directory not found: {directory}")

        content_types = sorted(
            path.stem
            for path in directory.glob("*.json")
            if path.is_file() and path.name != COMBINED_FILENAME
        )
        if not content_types:
            raise ImportExportError(f"No export files found in: {directory}")

        return content_types

    @staticmethod
    def load_entries(file_path: Path | str) -> list[Any]:
        """Read the entries of one export file.

        A JSON array is returned as is. An object contributes its ``data``
        list, and anything else yields no entries.

        Raises:
            ImportExportError: If the file cannot be read or is not valid JSON
        """
        try:
            with open(file_path, encoding="utf-8") as f:
                content = json.load(f)
        except (OSError, ValueError) as e:
            raise ImportExportError(f"Failed to load {file_path}: {e}") from e

        if isinstance(content, list):
            return content
        if isinstance(content, dict) and isinstance(content.get("data"), list):
            return content["data"]
        return []

    async def create_entry(
        self, requester: StrapiRequester, content_type: str, entry: Any
    ) -> tuple[bool, Any]:
        """Submit one entry as a creation request.

        Args:
            requester: Requester bound to the target instance
            content_type: Content type API name
            entry: Exported entry; source-assigned fields are removed first

        Returns:
            (True, response body) when the target answers 200 or 201,
            otherwise (False, error body or message)
        """
        if not isinstance(entry, dict):
            return False, f"Entry is not a JSON object: {entry!r}"

        try:
            response = await requester.post(
                content_type, body={"data": strip_source_fields(entry)}
            )
        except Exception as e:
            return False, str(e)

        if response.status in SUCCESS_STATUSES:
            return True, response.data
        return False, response.data

    async def import_entries(
        self, requester: StrapiRequester, content_type: str, entries: list[Any]
    ) -> ImportResult:
        """Import a list of entries in batches.

        Args:
            requester: Requester bound to the target instance
            content_type: Content type API name
            entries: Entries to create, in file order

        Returns:
            Success and failure counts for the content type
        """
        result = ImportResult(content_type=content_type)
        batches = list(chunked(entries, self.config.batch_size))

        async def submit(entry: Any) -> None:
            success, payload = await self.create_entry(requester, content_type, entry)
            if success:
                result.record_success()
            else:
                result.record_failure(payload)
                logger.error(f"Failed to import {content_type} entry: {payload}")

        for index, batch in enumerate(batches):
            await asyncio.gather(*(submit(entry) for entry in batch))
            logger.debug(
                f"{content_type}: batch {index + 1}/{len(batches)} done "
                f"({result.imported} imported, {result.failed} failed)"
            )

            if index < len(batches) - 1:
                await self._sleep(self.config.batch_delay)

        return result

    async def import_content_type(
        self, requester: StrapiRequester, content_type: str, input_dir: Path
    ) -> ImportResult:
        """Load one content type's export file and import its entries."""
        logger.info(f"Importing {content_type}...")

        file_path = input_dir / f"{content_type}.json"
        if not file_path.exists():
            logger.warning(f"File not found: {file_path}")
            return ImportResult(content_type=content_type)

        try:
            entries = self.load_entries(file_path)
        except ImportExportError as e:
            logger.error(str(e))
            return ImportResult(content_type=content_type)

        logger.info(
            f"Found {len(entries)} entries to import "
            f"({batch_count(len(entries), self.config.batch_size)} batches)"
        )
        result = await self.import_entries(requester, content_type, entries)
        logger.info(f"Imported {result.imported} entries, {result.failed} failed")

        return result

    async def import_all(self, input_dir: Path | str | None = None) -> ImportSummary:
        """Import every export file found in the input directory.

        Args:
            input_dir: Directory holding export files (defaults to config.export_dir)

        Returns:
            Per-type and total counts

        Raises:
            ConfigurationError: If no target token is configured
            ImportExportError: If the directory is missing or holds no export files
        """
        token = self.config.require_target_token()
        directory = Path(input_dir) if input_dir is not None else self.config.export_dir
        content_types = self.discover_content_types(directory)

        logger.info(f"Found {len(content_types)} content type files to import")

        summary = ImportSummary()
        async with StrapiRequester(
            self.config.target_url,
            token,
            timeout=self.config.request_timeout,
            http_client=self._http_client,
        ) as requester:
            for content_type in content_types:
                summary.add(await self.import_content_type(requester, content_type, directory))

        return summary
