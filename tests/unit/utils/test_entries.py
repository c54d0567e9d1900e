"""Tests for entry payload helpers."""

import copy

from strapi_migrate.utils import SOURCE_ONLY_FIELDS, strip_source_fields


def test_strips_source_fields(mock_v5_entries: list[dict]) -> None:
    cleaned = strip_source_fields(mock_v5_entries[0])

    assert not SOURCE_ONLY_FIELDS & cleaned.keys()
    assert cleaned == {
        "documentId": "abc123",
        "title": "Victoria Memorial",
        "rating": 4.8,
        "tags": ["museum", "heritage"],
        "location": {"lat": 22.5448, "lng": 88.3426},
    }


def test_other_fields_pass_through_unchanged(mock_v5_entries: list[dict]) -> None:
    """Test every non-source field is kept with an identical value."""
    for entry in mock_v5_entries:
        cleaned = strip_source_fields(entry)
        for key, value in entry.items():
            if key not in SOURCE_ONLY_FIELDS:
                assert cleaned[key] == value


def test_does_not_mutate_input(mock_v5_entries: list[dict]) -> None:
    original = copy.deepcopy(mock_v5_entries[0])
    strip_source_fields(mock_v5_entries[0])
    assert mock_v5_entries[0] == original


def test_nested_fields_are_not_stripped() -> None:
    """Test only top-level keys are removed."""
    entry = {"id": 1, "author": {"id": 7, "createdAt": "2024-01-01", "name": "Ana"}}
    assert strip_source_fields(entry) == {
        "author": {"id": 7, "createdAt": "2024-01-01", "name": "Ana"}
    }
