"""Top-level entry point: render a whole table into a PDF file."""

import logging
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, Union

from .config import ReportConfig
from .errors import DocumentError
from .metrics import FontMetrics, TableMetrics
from .pagination import PagePlan, plan_pages, rows_per_page
from .pdf_renderer import PageRenderer, RenderedPage
from .surface import PDFDocument
from .table_model import Column, ReportMetadata, Table

logger = logging.getLogger(__name__)

PDF_EXTENSION = ".pdf"


def normalize_output_path(path: Union[str, Path]) -> Path:
    """Append the .pdf extension when the path does not already end with it."""
    text = str(path)
    if not text.endswith(PDF_EXTENSION):
        text += PDF_EXTENSION
    return Path(text)


def plan_table(table: Table, metrics: TableMetrics) -> List[PagePlan]:
    """Validate the table and split its rows into pages."""
    table.validate()
    per_page = rows_per_page(metrics.usable_height, metrics.row_height)
    plans = plan_pages(table.number_of_rows, per_page)
    logger.info("Planned %d rows into %d pages (%d rows per page)",
                table.number_of_rows, len(plans), per_page)
    return plans


def generate_pdf(
    table: Table,
    output_path: Union[str, Path],
    metadata: ReportMetadata,
    fonts: Optional[FontMetrics] = None,
    document_factory: Callable[[Path], PDFDocument] = PDFDocument,
) -> Path:
    """
    Render the table to a PDF file and return the path written.

    The table is validated and paginated before the document is created,
    so configuration and data errors leave no output behind. I/O failures
    while building or saving the document are raised as DocumentError;
    the document is closed on every exit path.
    """
    path = normalize_output_path(output_path)
    metrics = TableMetrics.for_table(table, fonts)
    plans = plan_table(table, metrics)
    renderer = PageRenderer(table, metadata, metrics)

    rendered: List[RenderedPage] = []
    try:
        with document_factory(path) as document:
            for plan in plans:
                rendered.append(renderer.render_page(document, plan))
            document.save()
    except DocumentError:
        raise
    except OSError as exc:
        raise DocumentError(f"Failed to write {path}: {exc}") from exc

    logger.info("Wrote %s (%d pages)", path, len(rendered))
    return path


class TableReportGenerator:
    """Builds tables from a ReportConfig and writes them as PDF reports."""

    def __init__(self, config: Optional[ReportConfig] = None, fonts: Optional[FontMetrics] = None):
        self.config = config or ReportConfig()
        self.fonts = fonts

    def generate(
        self,
        columns: Sequence[Union[Column, str]],
        rows: List[List[Optional[str]]],
        period_start: Any,
        period_end: Any,
        total: Any,
        output_path: Optional[Union[str, Path]] = None,
    ) -> Path:
        """Render rows under the given columns; defaults to out_dir/report.pdf."""
        if output_path is None:
            self.config.out_dir.mkdir(parents=True, exist_ok=True)
            output_path = self.config.out_dir / "report.pdf"
        table = self.config.build_table(columns, rows)
        metadata = self.config.build_metadata(period_start, period_end, total)
        return generate_pdf(table, output_path, metadata, fonts=self.fonts)
