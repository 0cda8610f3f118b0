"""Draw one planned page of a table onto a drawing surface."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .layout_engine import PageLayout, compute_page_layout
from .metrics import TableMetrics, get_bold_font, require_font
from .pagination import PagePlan
from .surface import DrawingSurface
from .table_model import ReportMetadata, Table

logger = logging.getLogger(__name__)


@dataclass
class RenderedPage:
    """Summary of what was drawn on a page."""
    index: int
    start: int
    end: int
    line_count: int
    text_count: int


def cell_text(value: Optional[str]) -> str:
    """Text drawn for a cell; missing values draw as an empty string."""
    if value is None:
        return ""
    return str(value)


class PageRenderer:
    """Renders table pages and reports what each page contains."""

    def __init__(self, table: Table, metadata: ReportMetadata, metrics: TableMetrics):
        self.table = table
        self.metadata = metadata
        self.metrics = metrics
        self.regular_font = require_font(table.font_name)
        self.bold_font = require_font(get_bold_font(table.font_name))

    @property
    def rotation(self) -> int:
        return 90 if self.table.is_landscape else 0

    def render_page(self, document, plan: PagePlan) -> RenderedPage:
        """
        Allocate a page on the document and draw the rows of the plan.

        The page surface is closed before returning, also when drawing fails.
        """
        rows = plan.slice(self.table.rows)
        layout = compute_page_layout(self.table, self.metrics, len(rows))

        with document.new_page(self.table.page_size, self.rotation) as surface:
            surface.apply_frame(layout.frame)
            line_count = self._draw_grid(surface, layout)
            text_count = self._draw_text(surface, layout, rows)

        logger.debug("Rendered page %d: rows %d-%d, %d lines, %d text runs",
                     plan.index, plan.start, plan.end, line_count, text_count)
        return RenderedPage(
            index=plan.index,
            start=plan.start,
            end=plan.end,
            line_count=line_count,
            text_count=text_count,
        )

    def _draw_grid(self, surface: DrawingSurface, layout: PageLayout) -> int:
        """Draw row lines then column lines; returns the number of lines."""
        segments = layout.horizontal_segments() + layout.vertical_segments()
        for x1, y1, x2, y2 in segments:
            surface.draw_line(x1, y1, x2, y2)
        return len(segments)

    def _draw_text(
        self,
        surface: DrawingSurface,
        layout: PageLayout,
        rows: Sequence[Sequence[Optional[str]]]
    ) -> int:
        table = self.table
        count = 0

        # Report header caption
        surface.set_font(self.bold_font, table.caption_font_size)
        x, y = layout.header_caption_origin
        surface.draw_text(x, y, self.metadata.header_caption())
        count += 1

        baselines = layout.row_baselines()

        # Column headers
        surface.set_font(self.bold_font, table.header_font_size)
        count += self._write_row(surface, layout.cell_xs, baselines[0], table.column_names)

        # Content rows
        surface.set_font(self.regular_font, table.font_size)
        for row, y in zip(rows, baselines[1:]):
            count += self._write_row(surface, layout.cell_xs, y, row)

        # Summary caption
        surface.set_font(self.bold_font, table.caption_font_size)
        x, y = layout.summary_caption_origin()
        surface.draw_text(x, y, self.metadata.summary_caption())
        count += 1

        return count

    def _write_row(
        self,
        surface: DrawingSurface,
        xs: List[float],
        y: float,
        values: Sequence[Optional[str]]
    ) -> int:
        """Write one line of cells left to right."""
        for x, value in zip(xs, values):
            surface.draw_text(x, y, cell_text(value))
        return len(xs)
