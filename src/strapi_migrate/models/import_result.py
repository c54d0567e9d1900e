"""Counters produced by an import run."""

from typing import Any

from pydantic import BaseModel, Field


class ImportResult(BaseModel):
    """Outcome of importing one content type.

    Attributes:
        content_type: Content type name (export file stem)
        imported: Entries the target accepted (HTTP 200 or 201)
        failed: Entries rejected or lost to transport errors
        errors: Server error payloads or messages, one per failure
    """

    content_type: str
    imported: int = 0
    failed: int = 0
    errors: list[Any] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return self.imported + self.failed

    def record_success(self) -> None:
        self.imported += 1

    def record_failure(self, error: Any) -> None:
        self.failed += 1
        self.errors.append(error)


class ImportSummary(BaseModel):
    """Per-content-type results and run totals."""

    results: dict[str, ImportResult] = Field(default_factory=dict)

    def add(self, result: ImportResult) -> None:
        self.results[result.content_type] = result

    @property
    def total_imported(self) -> int:
        return sum(r.imported for r in self.results.values())

    @property
    def total_failed(self) -> int:
        return sum(r.failed for r in self.results.values())
