"""Utility helpers for strapi-migrate.

This package contains:
- Fixed-size batching of entry lists
- Removal of source-assigned entry fields
"""

from strapi_migrate.utils.batching import batch_count, chunked
from strapi_migrate.utils.entries import SOURCE_ONLY_FIELDS, strip_source_fields

__all__ = [
    "chunked",
    "batch_count",
    "SOURCE_ONLY_FIELDS",
    "strip_source_fields",
]
