from typing import List, Optional, Tuple

import pytest

from table_report.errors import DocumentError, FrameError
from table_report.table_model import Column, ReportMetadata, Table


class FakeFontMetrics:
    def __init__(self, height: float = 1000.0):
        self.height = height
        self.requested: List[str] = []

    def bounding_box_height(self, font_name: str) -> float:
        self.requested.append(font_name)
        return self.height


class RecordingSurface:
    """Records drawing calls instead of producing PDF content."""

    def __init__(self, document: "FakeDocument", media_box, rotation):
        self.document = document
        self.media_box = media_box
        self.rotation = rotation
        self.frames = []
        self.fonts: List[Tuple[str, float]] = []
        self.lines: List[Tuple[float, float, float, float]] = []
        self.texts: List[Tuple[float, float, str, Tuple[str, float]]] = []
        self.calls: List[str] = []
        self.closed = False
        self._font: Optional[Tuple[str, float]] = None

    def apply_frame(self, frame) -> None:
        if self.frames:
            raise FrameError("frame already applied")
        self.calls.append("frame")
        self.frames.append(frame)

    def set_font(self, font_name: str, font_size: float) -> None:
        self._font = (font_name, font_size)
        self.fonts.append(self._font)

    def draw_text(self, x: float, y: float, text: str) -> None:
        if self.document.fail_on_text is not None and text == self.document.fail_on_text:
            raise OSError("disk full")
        self.calls.append("text")
        self.texts.append((x, y, text, self._font))

    def draw_line(self, x1, y1, x2, y2) -> None:
        self.calls.append("line")
        self.lines.append((x1, y1, x2, y2))

    def close(self) -> None:
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class FakeDocument:
    instances: List["FakeDocument"] = []

    def __init__(self, path, fail_on_text=None, fail_on_save=False):
        self.path = path
        self.pages: List[RecordingSurface] = []
        self.saved = False
        self.closed = False
        self.fail_on_text = fail_on_text
        self.fail_on_save = fail_on_save
        FakeDocument.instances.append(self)

    def new_page(self, media_box, rotation=0) -> RecordingSurface:
        if self.closed:
            raise DocumentError("closed")
        surface = RecordingSurface(self, media_box, rotation)
        self.pages.append(surface)
        return surface

    def save(self) -> None:
        if self.fail_on_save:
            raise PermissionError("read-only file system")
        self.saved = True

    def close(self) -> None:
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


@pytest.fixture
def fake_fonts():
    return FakeFontMetrics()


@pytest.fixture
def fake_documents():
    FakeDocument.instances = []
    yield FakeDocument.instances
    FakeDocument.instances = []


def make_table(n_rows: int = 25, n_cols: int = 3, **kwargs) -> Table:
    columns = [Column(name=f"Col {i}", width=100.0) for i in range(n_cols)]
    rows = [[f"r{r}c{c}" for c in range(n_cols)] for r in range(n_rows)]
    kwargs.setdefault("height", 420.0)  # 21 rows of 20 -> 20 content rows per page
    return Table(columns=columns, rows=rows, **kwargs)


@pytest.fixture
def metadata():
    return ReportMetadata(period_start="2025-01-01", period_end="2025-01-31", total="123.45")
