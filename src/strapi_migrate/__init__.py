"""strapi-migrate: move Strapi content between instances over the REST API.

This package provides:
- An exporter writing each content type to a JSON file plus a combined bundle
- An importer replaying those files as creation requests in timed batches
- A small async request helper returning parsed-or-raw response bodies
"""

from .__version__ import __version__
from .client import StrapiRequester
from .config import MigrationConfig, load_config
from .exceptions import (
    ConfigurationError,
    ImportExportError,
    StrapiConnectionError,
    StrapiMigrateError,
)
from .export import ContentExporter, ContentImporter
from .models import (
    ApiResponse,
    ExportBundle,
    ImportResult,
    ImportSummary,
    JsonBody,
    TextBody,
)

__all__ = [
    "__version__",
    # Configuration
    "MigrationConfig",
    "load_config",
    # HTTP
    "StrapiRequester",
    "ApiResponse",
    "JsonBody",
    "TextBody",
    # Export/Import
    "ContentExporter",
    "ContentImporter",
    "ExportBundle",
    "ImportResult",
    "ImportSummary",
    # Exceptions
    "StrapiMigrateError",
    "ConfigurationError",
    "ImportExportError",
    "StrapiConnectionError",
]
