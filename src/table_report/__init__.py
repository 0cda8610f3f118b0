"""Render tabular data into paginated PDF reports."""

from .config import ReportConfig, load_config
from .document import TableReportGenerator, generate_pdf, normalize_output_path
from .errors import (
    ConfigurationError, DataError, DocumentError, FrameError, LayoutError,
    PageTooSmallError, ReportError, RowColumnMismatchError,
)
from .table_model import Column, Orientation, ReportMetadata, Table

__all__ = [
    "Column",
    "ConfigurationError",
    "DataError",
    "DocumentError",
    "FrameError",
    "LayoutError",
    "Orientation",
    "PageTooSmallError",
    "ReportConfig",
    "ReportError",
    "ReportMetadata",
    "RowColumnMismatchError",
    "Table",
    "TableReportGenerator",
    "generate_pdf",
    "load_config",
    "normalize_output_path",
]
