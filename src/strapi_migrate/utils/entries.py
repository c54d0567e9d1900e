"""Entry payload helpers."""

from typing import Any

# Assigned by the source instance; rejected or meaningless on creation.
SOURCE_ONLY_FIELDS = frozenset({"id", "createdAt", "updatedAt", "publishedAt"})


def strip_source_fields(entry: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of an entry without its source-assigned fields.

    Only top-level keys are removed. Every other field, including nested
    relations and components, is passed through untouched.

    Example:
        >>> strip_source_fields({"id": 3, "title": "Hi", "updatedAt": "2024-01-01"})
        {'title': 'Hi'}
    """
    return {key: value for key, value in entry.items() if key not in SOURCE_ONLY_FIELDS}
