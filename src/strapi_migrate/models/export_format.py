"""Combined export artifact written at the end of an export run."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def _utc_timestamp() -> str:
    """Current time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ExportBundle(BaseModel):
    """Timestamp plus every exported content type's entries.

    Serialized with camelCase keys (``exportedAt``, ``contentTypes``) to
    match the on-disk ``all-content.json`` layout.

    Example:
        >>> bundle = ExportBundle()
        >>> bundle.add("article", [{"id": 1, "title": "Hello"}])
        >>> bundle.entry_count("article")
        1
    """

    model_config = ConfigDict(populate_by_name=True)

    exported_at: str = Field(default_factory=_utc_timestamp, alias="exportedAt")
    content_types: dict[str, Any] = Field(default_factory=dict, alias="contentTypes")

    def add(self, content_type: str, entries: Any) -> None:
        """Record the entries exported for a content type."""
        self.content_types[content_type] = entries

    def entry_count(self, content_type: str) -> int:
        """Number of entries for a content type (0 if absent or not a list)."""
        entries = self.content_types.get(content_type)
        return len(entries) if isinstance(entries, list) else 0

    def total_entries(self) -> int:
        return sum(self.entry_count(name) for name in self.content_types)

    def to_json_dict(self) -> dict[str, Any]:
        """Serializable form using the on-disk key names."""
        return self.model_dump(mode="json", by_alias=True)
