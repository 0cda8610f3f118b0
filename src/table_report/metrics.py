"""Font and page metrics consumed by the pagination planner and layout engine."""

from dataclasses import dataclass
from typing import Dict, Optional, Protocol

from reportlab.pdfbase import pdfmetrics

from .errors import ConfigurationError
from .table_model import Table

# Space reserved above the grid for the report header caption
CAPTION_SPACE = 20

# FontBBox heights (urY - llY) of the standard Type 1 fonts, from their AFM files
STANDARD_FONT_BBOX_HEIGHTS: Dict[str, float] = {
    "Helvetica": 931 - (-225),
    "Helvetica-Bold": 962 - (-228),
    "Helvetica-Oblique": 931 - (-225),
    "Helvetica-BoldOblique": 962 - (-228),
    "Times-Roman": 898 - (-218),
    "Times-Bold": 935 - (-218),
    "Times-Italic": 883 - (-217),
    "Times-BoldItalic": 921 - (-218),
    "Courier": 805 - (-250),
    "Courier-Bold": 801 - (-250),
    "Courier-Oblique": 805 - (-250),
    "Courier-BoldOblique": 801 - (-250),
}


class FontMetrics(Protocol):
    """Reports glyph-space metrics for a named font."""

    def bounding_box_height(self, font_name: str) -> float:
        """Font bounding box height in 1000-unit glyph space."""
        ...


class ReportLabFontMetrics:
    """Font metrics looked up through ReportLab's font registry."""

    def bounding_box_height(self, font_name: str) -> float:
        face = pdfmetrics.getFont(require_font(font_name)).face
        bbox = getattr(face, "bbox", None)
        if bbox and bbox[3] - bbox[1] > 0:
            return float(bbox[3] - bbox[1])
        if font_name in STANDARD_FONT_BBOX_HEIGHTS:
            return float(STANDARD_FONT_BBOX_HEIGHTS[font_name])
        return float(face.ascent - face.descent)


BOLD_VARIANTS: Dict[str, str] = {
    "Times-Roman": "Times-Bold",
    "Times": "Times-Bold",
    "Times-Italic": "Times-BoldItalic",
    "Helvetica-Oblique": "Helvetica-BoldOblique",
    "Courier-Oblique": "Courier-BoldOblique",
}


def get_bold_font(font_name: str) -> str:
    """Get the bold variant of a font family."""
    if font_name in BOLD_VARIANTS:
        return BOLD_VARIANTS[font_name]
    elif "Bold" in font_name:
        return font_name
    else:
        return f"{font_name}-Bold"


def require_font(font_name: str) -> str:
    """Return font_name if ReportLab can draw with it; raise ConfigurationError otherwise."""
    try:
        pdfmetrics.getFont(font_name)
    except KeyError:
        raise ConfigurationError(f"Unknown font {font_name!r}") from None
    return font_name


@dataclass(frozen=True)
class TableMetrics:
    """Page and font measurements for one table configuration."""
    usable_height: float
    usable_width: float
    reference_height: float  # Page height in portrait, page width in landscape
    row_height: float
    margin: float
    cell_margin: float
    font_size: float
    font_bbox_height: float

    @classmethod
    def for_table(cls, table: Table, fonts: Optional[FontMetrics] = None) -> "TableMetrics":
        """
        Derive metrics from a table's page settings.

        Landscape pages are drawn in a rotated frame, so the page width
        becomes the vertical reference and the height the horizontal one.
        """
        fonts = fonts or ReportLabFontMetrics()
        page_width, page_height = table.page_size
        if table.is_landscape:
            reference_height, reference_width = page_width, page_height
        else:
            reference_height, reference_width = page_height, page_width

        if table.height is not None:
            usable_height = table.height
        else:
            usable_height = reference_height - 2 * table.margin - CAPTION_SPACE

        return cls(
            usable_height=usable_height,
            usable_width=reference_width - 2 * table.margin,
            reference_height=reference_height,
            row_height=table.row_height,
            margin=table.margin,
            cell_margin=table.cell_margin,
            font_size=table.font_size,
            font_bbox_height=fonts.bounding_box_height(table.font_name),
        )
