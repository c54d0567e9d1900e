"""Data models for strapi-migrate."""

from .export_format import ExportBundle
from .import_result import ImportResult, ImportSummary
from .response import ApiResponse, JsonBody, ResponseBody, TextBody

__all__ = [
    "ApiResponse",
    "JsonBody",
    "TextBody",
    "ResponseBody",
    "ExportBundle",
    "ImportResult",
    "ImportSummary",
]
