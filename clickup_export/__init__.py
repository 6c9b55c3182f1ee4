"""
Export ClickUp Docs and Wikis to markdown files.

Provides:
- ClickUpAPI: ClickUp API client with pacing and retries
- ClickUpExporter: Doc/page tree walk that writes markdown files
- setup_logging: Logging configuration for console and file output
- sanitize_filename: Safe filename conversion
"""

__version__ = "1.0.0"

from clickup_export.clickup_api import ClickUpAPI
from clickup_export.errors import ClickUpAPIError, ErrorKind
from clickup_export.exporter import ClickUpExporter
from clickup_export.filename_utils import sanitize_filename
from clickup_export.logging_config import setup_logging, get_log_dir
from clickup_export.models import ExportOptions, ExportResult

__all__ = [
    "ClickUpAPI",
    "ClickUpAPIError",
    "ClickUpExporter",
    "ErrorKind",
    "ExportOptions",
    "ExportResult",
    "get_log_dir",
    "sanitize_filename",
    "setup_logging",
]
