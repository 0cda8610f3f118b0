"""Layout engine for placing a table grid and its text on PDF pages."""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .metrics import CAPTION_SPACE, TableMetrics
from .table_model import Table

# Header caption baseline sits this far above the top grid line
HEADER_CAPTION_OFFSET = 15
# Summary caption baseline sits this far below the last content line
SUMMARY_GAP = 5

PAGE_FRAME = "page"
CONTENT_FRAME = "content"


@dataclass(frozen=True)
class AffineTransform:
    """A PDF transformation matrix [a b c d e f]."""
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        """Map a point from this frame into the parent frame."""
        return (
            self.a * x + self.c * y + self.e,
            self.b * x + self.d * y + self.f,
        )

    def compose(self, other: "AffineTransform") -> "AffineTransform":
        """Return the transform equivalent to applying self, then other."""
        return AffineTransform(
            a=self.a * other.a + self.b * other.c,
            b=self.a * other.b + self.b * other.d,
            c=self.c * other.a + self.d * other.c,
            d=self.c * other.b + self.d * other.d,
            e=self.e * other.a + self.f * other.c + other.e,
            f=self.e * other.b + self.f * other.d + other.f,
        )

    def as_tuple(self) -> Tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    @property
    def is_identity(self) -> bool:
        return self == IDENTITY


IDENTITY = AffineTransform()


def landscape_transform(page_width: float) -> AffineTransform:
    """Rotate by 90 degrees and shift by the unrotated page width."""
    return AffineTransform(0, 1, -1, 0, page_width, 0)


@dataclass(frozen=True)
class CoordinateFrame:
    """
    The coordinate system drawing commands are expressed in.

    Portrait tables draw straight into page space. Landscape tables draw
    into a content frame whose transform maps onto the rotated page and
    must be applied exactly once per page before anything is drawn.
    """
    name: str
    transform: AffineTransform

    @classmethod
    def page(cls) -> "CoordinateFrame":
        return cls(name=PAGE_FRAME, transform=IDENTITY)

    @classmethod
    def content(cls, page_width: float) -> "CoordinateFrame":
        return cls(name=CONTENT_FRAME, transform=landscape_transform(page_width))

    @classmethod
    def for_table(cls, table: Table) -> "CoordinateFrame":
        if table.is_landscape:
            return cls.content(table.page_size[0])
        return cls.page()

    @property
    def needs_transform(self) -> bool:
        return not self.transform.is_identity

    def to_page(self, x: float, y: float) -> Tuple[float, float]:
        return self.transform.apply(x, y)


def table_top_y(reference_height: float, margin: float) -> float:
    """Y of the top grid line, leaving room for the header caption."""
    return reference_height - margin - CAPTION_SPACE


def ascent_correction(font_bbox_height: float, font_size: float) -> float:
    """Quarter of the scaled font bounding box height."""
    return (font_bbox_height / 1000 * font_size) / 4


def text_baseline_offset(row_height: float, font_bbox_height: float, font_size: float) -> float:
    """Distance from a row's top line down to its text baseline."""
    return row_height / 2 + ascent_correction(font_bbox_height, font_size)


def next_line_y(y: float, row_height: float) -> float:
    """Baseline of the row below the one at y."""
    return y - row_height


def row_line_ys(top_y: float, row_height: float, n_rows: int) -> List[float]:
    """Y of every horizontal grid line: top border, separators, bottom border."""
    return [top_y - i * row_height for i in range(n_rows + 2)]


def table_bottom_y(top_y: float, row_height: float, n_rows: int) -> float:
    """Y of the bottom grid line for a header row plus n_rows content rows."""
    return top_y - (row_height + row_height * n_rows)


def column_line_xs(left_x: float, widths: Sequence[float]) -> List[float]:
    """X of every vertical grid line, including the right edge."""
    xs = [left_x]
    for width in widths:
        xs.append(xs[-1] + width)
    return xs


def cell_xs(start_x: float, widths: Sequence[float]) -> List[float]:
    """X of the text origin of each cell in a row."""
    return column_line_xs(start_x, widths)[:-1]


@dataclass(frozen=True)
class PageLayout:
    """Every coordinate needed to draw one page of the table."""
    frame: CoordinateFrame
    row_height: float
    top_y: float
    bottom_y: float
    left_x: float
    right_x: float
    row_lines: List[float]
    column_lines: List[float]
    text_origin: Tuple[float, float]  # Baseline of the column header row
    cell_xs: List[float]
    header_caption_origin: Tuple[float, float]

    @property
    def n_rows(self) -> int:
        """Content rows on this page (header row excluded)."""
        return len(self.row_lines) - 2

    def horizontal_segments(self) -> List[Tuple[float, float, float, float]]:
        return [(self.left_x, y, self.right_x, y) for y in self.row_lines]

    def vertical_segments(self) -> List[Tuple[float, float, float, float]]:
        return [(x, self.top_y, x, self.bottom_y) for x in self.column_lines]

    def row_baselines(self) -> List[float]:
        """Baselines of the header row followed by each content row."""
        y = self.text_origin[1]
        baselines = []
        for _ in range(self.n_rows + 1):
            baselines.append(y)
            y = next_line_y(y, self.row_height)
        return baselines

    def summary_caption_origin(self) -> Tuple[float, float]:
        """Below the baseline that would follow the last content row."""
        y_after_last = self.text_origin[1] - self.row_height * (self.n_rows + 1)
        return (self.left_x, y_after_last - SUMMARY_GAP)


def compute_page_layout(table: Table, metrics: TableMetrics, n_rows: int) -> PageLayout:
    """
    Compute grid and text coordinates for a page holding n_rows content rows.

    Coordinates are in the table's coordinate frame; for landscape tables
    that is the rotated content frame.
    """
    widths = [column.width for column in table.columns]
    margin = metrics.margin
    top_y = table_top_y(metrics.reference_height, margin)

    origin_x = margin + metrics.cell_margin
    origin_y = top_y - text_baseline_offset(
        metrics.row_height, metrics.font_bbox_height, metrics.font_size
    )

    return PageLayout(
        frame=CoordinateFrame.for_table(table),
        row_height=metrics.row_height,
        top_y=top_y,
        bottom_y=table_bottom_y(top_y, metrics.row_height, n_rows),
        left_x=margin,
        right_x=margin + table.width,
        row_lines=row_line_ys(top_y, metrics.row_height, n_rows),
        column_lines=column_line_xs(margin, widths),
        text_origin=(origin_x, origin_y),
        cell_xs=cell_xs(origin_x, widths),
        header_caption_origin=(margin, top_y + HEADER_CAPTION_OFFSET),
    )
