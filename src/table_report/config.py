"""Configuration dataclass and YAML loading for table reports."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import yaml
from reportlab.lib.pagesizes import A4, LEGAL, LETTER

from .errors import ConfigurationError
from .table_model import Column, Orientation, ReportMetadata, Table

PAGE_SIZES: Dict[str, Tuple[float, float]] = {
    "LETTER": LETTER,  # 612 x 792 points
    "A4": A4,
    "LEGAL": LEGAL,
}


@dataclass
class ReportConfig:
    """Page, font and caption settings for rendered reports."""

    page_size: str = "LETTER"
    orientation: str = "portrait"  # "portrait" or "landscape"
    margin: float = 10.0
    cell_margin: float = 2.0
    row_height: float = 20.0
    font_name: str = "Helvetica"
    font_size: float = 10.0
    header_font_size: float = 11.0
    caption_font_size: float = 12.0
    title: str = "Expenses Report"
    currency: str = "ILS"
    out_dir: Path = field(default_factory=lambda: Path("out"))

    @property
    def page_dimensions(self) -> Tuple[float, float]:
        try:
            return PAGE_SIZES[self.page_size.upper()]
        except KeyError:
            raise ConfigurationError(
                f"Unknown page size {self.page_size!r}; expected one of {sorted(PAGE_SIZES)}"
            ) from None

    @property
    def page_orientation(self) -> Orientation:
        try:
            return Orientation(self.orientation.lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown orientation {self.orientation!r}; expected portrait or landscape"
            ) from None

    @property
    def usable_width(self) -> float:
        """Horizontal space available to columns in the drawing frame."""
        width, height = self.page_dimensions
        if self.page_orientation == Orientation.LANDSCAPE:
            width = height
        return width - 2 * self.margin

    def equal_columns(self, names: Sequence[str]) -> List[Column]:
        """Columns splitting the usable width evenly."""
        if not names:
            raise ConfigurationError("At least one column name is required")
        width = self.usable_width / len(names)
        return [Column(name=name, width=width) for name in names]

    def build_table(
        self,
        columns: Sequence[Union[Column, str]],
        rows: List[List[Optional[str]]],
    ) -> Table:
        """Create a table from column names (equal widths) or Column objects."""
        if columns and all(isinstance(c, str) for c in columns):
            columns = self.equal_columns(columns)
        return Table(
            columns=list(columns),
            rows=rows,
            page_size=self.page_dimensions,
            orientation=self.page_orientation,
            margin=self.margin,
            cell_margin=self.cell_margin,
            row_height=self.row_height,
            font_name=self.font_name,
            font_size=self.font_size,
            header_font_size=self.header_font_size,
            caption_font_size=self.caption_font_size,
        )

    def build_metadata(self, period_start: Any, period_end: Any, total: Any) -> ReportMetadata:
        return ReportMetadata(
            period_start=period_start,
            period_end=period_end,
            total=total,
            title=self.title,
            currency=self.currency,
        )

    @classmethod
    def from_yaml(cls, path: Path) -> "ReportConfig":
        """Load configuration from a YAML file."""
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(f"Unknown config keys in {path}: {sorted(unknown)}")

        # Convert out_dir to Path
        if "out_dir" in data:
            data["out_dir"] = Path(data["out_dir"])

        return cls(**data)

    def to_yaml(self, path: Path) -> None:
        """Save configuration to a YAML file."""
        data = {
            "page_size": self.page_size,
            "orientation": self.orientation,
            "margin": self.margin,
            "cell_margin": self.cell_margin,
            "row_height": self.row_height,
            "font_name": self.font_name,
            "font_size": self.font_size,
            "header_font_size": self.header_font_size,
            "caption_font_size": self.caption_font_size,
            "title": self.title,
            "currency": self.currency,
            "out_dir": str(self.out_dir),
        }
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def load_config(path: Optional[Path] = None) -> ReportConfig:
    """Load config from path or return default config."""
    if path is None:
        return ReportConfig()
    return ReportConfig.from_yaml(path)
