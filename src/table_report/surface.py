"""Drawing surface and document adapters over the ReportLab canvas."""

import logging
from pathlib import Path
from typing import Callable, Optional, Protocol, Tuple, Union

from reportlab.pdfgen import canvas

from .errors import DocumentError, FrameError
from .layout_engine import CoordinateFrame

logger = logging.getLogger(__name__)


class DrawingSurface(Protocol):
    """Drawing operations available while one page is open."""

    def apply_frame(self, frame: CoordinateFrame) -> None: ...

    def set_font(self, font_name: str, font_size: float) -> None: ...

    def draw_text(self, x: float, y: float, text: str) -> None: ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def close(self) -> None: ...

    def __enter__(self) -> "DrawingSurface": ...

    def __exit__(self, exc_type, exc, tb) -> None: ...


class CanvasSurface:
    """
    One page of a ReportLab canvas.

    Closing the surface finishes the page. The surface can be used as a
    context manager so the page is finished on every exit path.
    """

    def __init__(self, c: canvas.Canvas, on_close: Optional[Callable[[], None]] = None):
        self._canvas = c
        self._on_close = on_close
        self._frame: Optional[CoordinateFrame] = None
        self.closed = False

    @property
    def frame(self) -> Optional[CoordinateFrame]:
        return self._frame

    def _require_open(self) -> canvas.Canvas:
        if self.closed:
            raise DocumentError("Drawing surface is already closed")
        return self._canvas

    def apply_frame(self, frame: CoordinateFrame) -> None:
        """Switch to the given coordinate frame; allowed once per page."""
        c = self._require_open()
        if self._frame is not None:
            raise FrameError(
                f"Frame {self._frame.name!r} already applied to this page"
            )
        if frame.needs_transform:
            c.transform(*frame.transform.as_tuple())
        self._frame = frame

    def set_font(self, font_name: str, font_size: float) -> None:
        self._require_open().setFont(font_name, font_size)

    def draw_text(self, x: float, y: float, text: str) -> None:
        self._require_open().drawString(x, y, text)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._require_open().line(x1, y1, x2, y2)

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        try:
            self._canvas.showPage()
        finally:
            if self._on_close is not None:
                self._on_close()

    def __enter__(self) -> "CanvasSurface":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class PDFDocument:
    """A PDF file being built page by page on a ReportLab canvas."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._canvas: Optional[canvas.Canvas] = canvas.Canvas(str(self.path))
        self._page_open = False
        self.page_count = 0

    @property
    def closed(self) -> bool:
        return self._canvas is None

    def _require_open(self) -> canvas.Canvas:
        if self._canvas is None:
            raise DocumentError(f"Document {self.path} is already closed")
        return self._canvas

    def new_page(self, media_box: Tuple[float, float], rotation: int = 0) -> CanvasSurface:
        """Allocate the next page with the given media box and rotation."""
        c = self._require_open()
        if self._page_open:
            raise DocumentError("Previous page must be closed before a new one is started")
        c.setPageSize(media_box)
        c.setPageRotation(rotation)
        self._page_open = True
        self.page_count += 1
        logger.debug("Started page %d (%s x %s, rotation %d)",
                     self.page_count, media_box[0], media_box[1], rotation)
        return CanvasSurface(c, on_close=self._page_closed)

    def _page_closed(self) -> None:
        self._page_open = False

    def save(self) -> None:
        c = self._require_open()
        if self._page_open:
            raise DocumentError("Cannot save while a page is still open")
        c.save()
        logger.debug("Saved %s with %d pages", self.path, self.page_count)

    def close(self) -> None:
        """Release the canvas; unsaved content is discarded."""
        self._canvas = None
        self._page_open = False

    def __enter__(self) -> "PDFDocument":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
