"""Error types raised while laying out and rendering a table report."""

from typing import Optional


class ReportError(Exception):
    """Base class for all table report failures."""


class ConfigurationError(ReportError, ValueError):
    """Table or report settings that cannot produce a valid layout."""


class PageTooSmallError(ConfigurationError):
    """The page cannot hold a column header plus at least one content row."""

    def __init__(
        self,
        rows_per_page: int,
        usable_height: Optional[float] = None,
        row_height: Optional[float] = None,
    ):
        self.rows_per_page = rows_per_page
        self.usable_height = usable_height
        self.row_height = row_height
        if usable_height is None or row_height is None:
            message = f"Page too small: {rows_per_page} rows per page"
        else:
            message = (
                f"Page too small: usable height {usable_height} holds "
                f"{rows_per_page} content rows of height {row_height}"
            )
        super().__init__(message)


# Layout failures share the configuration branch of the hierarchy.
LayoutError = ConfigurationError


class DataError(ReportError, ValueError):
    """Table content that does not match the table definition."""


class RowColumnMismatchError(DataError):
    """A row has a different number of cells than the table has columns."""

    def __init__(self, row_index: int, expected: int, actual: int):
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row {row_index} has {actual} cells, expected {expected}"
        )


class DocumentError(ReportError, OSError):
    """Creating, drawing on or saving the output document failed."""


class FrameError(ReportError):
    """A coordinate frame was applied more than once to the same page."""
