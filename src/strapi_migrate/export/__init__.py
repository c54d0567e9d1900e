"""Export and import of Strapi content as JSON files.

The exporter writes one file per content type plus a combined bundle; the
importer replays the per-type files against another instance.
"""

from .exporter import COMBINED_FILENAME, DEFAULT_CONTENT_TYPES, ContentExporter
from .importer import ContentImporter

__all__ = [
    "ContentExporter",
    "ContentImporter",
    "COMBINED_FILENAME",
    "DEFAULT_CONTENT_TYPES",
]
