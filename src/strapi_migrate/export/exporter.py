"""Export orchestration for Strapi content.

Fetches each content type from the source instance in turn and writes the
entries to ``<output_dir>/<type>.json``, followed by a combined
``all-content.json`` bundle.
"""

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import httpx

from strapi_migrate.client import StrapiRequester
from strapi_migrate.config import MigrationConfig
from strapi_migrate.exceptions import ImportExportError
from strapi_migrate.models import ApiResponse, ExportBundle

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPES: tuple[str, ...] = (
    "mycitykolkata",
    "cover-content",
    "healthcare",
    "attraction",
    "suggestion",
)

COMBINED_FILENAME = "all-content.json"

# Single page, every relation populated.
EXPORT_QUERY: dict[str, Any] = {"pagination[limit]": 1000, "populate": "*"}


def extract_entries(response: ApiResponse) -> Any:
    """Pull the entry list out of a collection response.

    Returns the ``data`` member of a JSON object body when present, otherwise
    the whole body (parsed value or raw text).
    """
    body = response.data
    if response.is_json and isinstance(body, dict) and body.get("data") is not None:
        return body["data"]
    return body


class ContentExporter:
    """Export content types from a source instance to JSON files.

    Content types are fetched sequentially. A type whose request fails, whose
    response status is not 200, or whose body holds no data is logged and left
    out of the export; the remaining types are still exported.

    Example:
        >>> import asyncio
        >>> from strapi_migrate import ContentExporter, load_config
        >>>
        >>> exporter = ContentExporter(load_config())
        >>> bundle = asyncio.run(exporter.export_all(["article", "author"]))
        >>> print(bundle.total_entries())
    """

    def __init__(
        self, config: MigrationConfig, *, http_client: httpx.AsyncClient | None = None
    ) -> None:
        """Initialize exporter.

        Args:
            config: Migration settings (source URL/token, export directory)
            http_client: Optional preconfigured HTTP client for requests
        """
        self.config = config
        self._http_client = http_client

    async def export_content_type(
        self, requester: StrapiRequester, content_type: str
    ) -> Any | None:
        """Fetch all entries of one content type.

        Args:
            requester: Requester bound to the source instance
            content_type: Content type API name (e.g. "article")

        Returns:
            The exported entries, or None if the type could not be exported
        """
        logger.info(f"Exporting {content_type}...")

        try:
            response = await requester.get(content_type, params=EXPORT_QUERY)
            if response.status != 200:
                logger.error(
                    f"Failed to export {content_type} (HTTP {response.status}): {response.data}"
                )
                return None
            entries = extract_entries(response)
        except Exception as e:
            logger.error(f"Error exporting {content_type}: {e}")
            return None

        count = len(entries) if isinstance(entries, list) else 0
        logger.info(f"Exported {count} entries for {content_type}")
        return entries

    async def export_all(
        self,
        content_types: Sequence[str] = DEFAULT_CONTENT_TYPES,
        output_dir: Path | str | None = None,
    ) -> ExportBundle:
        """Export content types and write per-type and combined files.

        Args:
            content_types: Content type API names, exported in order
            output_dir: Destination directory (defaults to config.export_dir)

        Returns:
            Bundle of everything that was exported

        Raises:
            ConfigurationError: If no source token is configured
            ImportExportError: If an export file cannot be written
        """
        token = self.config.require_source_token()
        output = Path(output_dir) if output_dir is not None else self.config.export_dir

        if not output.exists():
            output.mkdir(parents=True, exist_ok=True)
            logger.info(f"Created output directory: {output}")

        bundle = ExportBundle()

        async with StrapiRequester(
            self.config.source_url,
            token,
            timeout=self.config.request_timeout,
            http_client=self._http_client,
        ) as requester:
            for content_type in content_types:
                entries = await self.export_content_type(requester, content_type)
                if entries is None:
                    continue
                # Empty lists and objects are still written; empty text is not.
                if not isinstance(entries, (list, dict)) and not entries:
                    logger.warning(f"No data returned for {content_type}, skipping")
                    continue

                bundle.add(content_type, entries)
                file_path = self.save_entries(entries, output / f"{content_type}.json")
                logger.info(f"Saved to: {file_path}")

        combined_path = self.save_bundle(bundle, output / COMBINED_FILENAME)
        logger.info(f"Combined export saved to: {combined_path}")

        return bundle

    @staticmethod
    def save_entries(entries: Any, file_path: Path | str) -> Path:
        """Write one content type's entries as indented JSON.

        Raises:
            ImportExportError: If the file cannot be written
        """
        return _write_json(entries, Path(file_path))

    @staticmethod
    def save_bundle(bundle: ExportBundle, file_path: Path | str) -> Path:
        """Write the combined bundle as indented JSON.

        Raises:
            ImportExportError: If the file cannot be written
        """
        return _write_json(bundle.to_json_dict(), Path(file_path))


def _write_json(value: Any, path: Path) -> Path:
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(value, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise ImportExportError(f"Failed to write {path}: {e}") from e
    return path
