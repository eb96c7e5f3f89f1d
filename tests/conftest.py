import io
from pathlib import Path

import docx
import openpyxl
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from doc_classifier.tracing.session import TraceSession
from tests.helpers import RecordingTracer

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture()
def recording_tracer() -> RecordingTracer:
    return RecordingTracer()


@pytest.fixture()
def trace(recording_tracer: RecordingTracer) -> TraceSession:
    return TraceSession(tracer=recording_tracer, token="token-1")


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
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
def sample_docx_bytes() -> bytes:
    """A Word document with two paragraphs and a one-row table."""
    document = docx.Document()
    document.add_heading("Service Agreement", level=1)
    document.add_paragraph("This agreement is made between Acme and Globex.")
    table = document.add_table(rows=1, cols=2)
    table.cell(0, 0).text = "Term"
    table.cell(0, 1).text = "12 months"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def three_sheet_xlsx_bytes() -> bytes:
    """A workbook with sheets Summary, Details, Notes in that order."""
    workbook = openpyxl.Workbook()
    summary = workbook.active
    summary.title = "Summary"
    summary.append(["name", "amount"])
    summary.append(["Alice", 30])
    details = workbook.create_sheet("Details")
    details.append(["invoice", "INV-001"])
    notes = workbook.create_sheet("Notes")
    notes.append(["paid in full"])
    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()


@pytest.fixture()
def invoices_xls_bytes() -> bytes:
    """A legacy BIFF8 workbook: Invoices (with a date-formatted cell), then Notes."""
    return (FIXTURES / "invoices.xls").read_bytes()
