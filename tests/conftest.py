import io

import docx
import pytest
from PIL import Image
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from resume_analyzer.pdf.factory import PdfBackendFactory

RESUME_LINES = [
    "Jane Candidate - Software Engineer",
    "Experience: five years building Python data pipelines",
    "Skills: Python, SQL, Docker, Kubernetes",
]


@pytest.fixture(autouse=True)
def _reset_shared_pdf_backends() -> None:
    PdfBackendFactory.reset_shared()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a single-page PDF whose text layer is well above 50 chars."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    y = 720
    for line in RESUME_LINES:
        c.drawString(72, y, line)
        y -= 20
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def docx_bytes() -> bytes:
    """Generate a Word document with two paragraphs and a table."""
    document = docx.Document()
    document.add_paragraph("Jane Candidate")
    document.add_paragraph("Python developer")
    table = document.add_table(rows=1, cols=2)
    table.rows[0].cells[0].text = "Skill"
    table.rows[0].cells[1].text = "Python"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (120, 40), "white").save(buf, format="PNG")
    return buf.getvalue()
