import pytest
from reportlab.lib.pagesizes import LETTER

from table_report.errors import DocumentError, FrameError
from table_report.layout_engine import CoordinateFrame
from table_report.surface import PDFDocument


def test_pages_are_counted_and_saved(tmp_path):
    path = tmp_path / "doc.pdf"
    with PDFDocument(path) as document:
        for _ in range(3):
            with document.new_page(LETTER, 0) as surface:
                surface.apply_frame(CoordinateFrame.page())
                surface.set_font("Helvetica", 10)
                surface.draw_line(10, 10, 100, 10)
                surface.draw_text(10, 20, "hello")
            assert surface.closed
        document.save()
        assert document.page_count == 3
    assert document.closed
    assert b"/Count 3" in path.read_bytes()


def test_frame_applied_twice_is_rejected(tmp_path):
    with PDFDocument(tmp_path / "doc.pdf") as document:
        with document.new_page(LETTER, 90) as surface:
            surface.apply_frame(CoordinateFrame.content(LETTER[0]))
            with pytest.raises(FrameError):
                surface.apply_frame(CoordinateFrame.content(LETTER[0]))
            assert surface.frame.name == "content"


def test_drawing_on_closed_surface_fails(tmp_path):
    with PDFDocument(tmp_path / "doc.pdf") as document:
        surface = document.new_page(LETTER)
        surface.close()
        surface.close()  # second close is a no-op
        with pytest.raises(DocumentError):
            surface.draw_text(0, 0, "late")


def test_new_page_requires_previous_page_closed(tmp_path):
    with PDFDocument(tmp_path / "doc.pdf") as document:
        document.new_page(LETTER)
        with pytest.raises(DocumentError):
            document.new_page(LETTER)
        with pytest.raises(DocumentError):
            document.save()


def test_closed_document_rejects_use(tmp_path):
    document = PDFDocument(tmp_path / "doc.pdf")
    document.close()
    with pytest.raises(DocumentError):
        document.new_page(LETTER)
    with pytest.raises(DocumentError):
        document.save()
    assert not (tmp_path / "doc.pdf").exists()
