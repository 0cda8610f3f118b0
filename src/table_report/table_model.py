"""Table, column and report metadata definitions."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from reportlab.lib.pagesizes import LETTER

from .errors import ConfigurationError, RowColumnMismatchError


class Orientation(Enum):
    """Page orientation of the rendered table."""
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass(frozen=True)
class Column:
    """A named table column with a fixed width in points."""
    name: str
    width: float


@dataclass
class Table:
    """Columns, rows and page settings for one rendered table."""

    columns: List[Column]
    rows: List[List[Optional[str]]] = field(default_factory=list)
    page_size: Tuple[float, float] = LETTER  # Media box, never rotated
    orientation: Orientation = Orientation.PORTRAIT
    margin: float = 10.0
    cell_margin: float = 2.0
    row_height: float = 20.0
    font_name: str = "Helvetica"
    font_size: float = 10.0
    header_font_size: float = 11.0  # Column header row
    caption_font_size: float = 12.0  # Report title and summary lines
    height: Optional[float] = None  # Usable table height; derived when None

    @classmethod
    def from_records(
        cls,
        columns: Sequence[Column],
        records: Iterable[Dict[str, Any]],
        **kwargs
    ) -> "Table":
        """Build a table from dict records keyed by column name."""
        rows = []
        for record in records:
            row = []
            for column in columns:
                value = record.get(column.name)
                row.append(None if value is None else str(value))
            rows.append(row)
        return cls(columns=list(columns), rows=rows, **kwargs)

    @property
    def is_landscape(self) -> bool:
        return self.orientation == Orientation.LANDSCAPE

    @property
    def width(self) -> float:
        """Total table width (sum of column widths)."""
        return sum(column.width for column in self.columns)

    @property
    def column_names(self) -> List[str]:
        return [column.name for column in self.columns]

    @property
    def number_of_rows(self) -> int:
        return len(self.rows)

    @property
    def number_of_columns(self) -> int:
        return len(self.columns)

    def validate(self) -> None:
        """
        Check the table invariants before anything is drawn.

        Raises ConfigurationError for unusable settings and
        RowColumnMismatchError for the first row whose cell count
        differs from the column count.
        """
        if not self.columns:
            raise ConfigurationError("Table has no columns")
        for column in self.columns:
            if column.width <= 0:
                raise ConfigurationError(
                    f"Column {column.name!r} has non-positive width {column.width}"
                )
        if self.row_height <= 0:
            raise ConfigurationError(f"Row height must be positive, got {self.row_height}")
        if self.margin < 0:
            raise ConfigurationError(f"Margin must not be negative, got {self.margin}")
        if self.cell_margin < 0:
            raise ConfigurationError(f"Cell margin must not be negative, got {self.cell_margin}")
        if self.font_size <= 0:
            raise ConfigurationError(f"Font size must be positive, got {self.font_size}")

        expected = self.number_of_columns
        for row_index, row in enumerate(self.rows):
            if len(row) != expected:
                raise RowColumnMismatchError(row_index, expected, len(row))


@dataclass
class ReportMetadata:
    """Date range and total shown above and below the table."""
    period_start: Any
    period_end: Any
    total: Any
    title: str = "Expenses Report"
    currency: str = "ILS"

    def header_caption(self) -> str:
        return f"{self.title} [ {self.period_start} - {self.period_end} ]"

    def summary_caption(self) -> str:
        return f"Summary is: {self.total} {self.currency}"
