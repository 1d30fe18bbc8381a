import io

import pytest
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas


def make_pdf(*pages: list[str]) -> bytes:
    """Render each page's lines top-down into a PDF."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    for lines in pages:
        y = 760
        for line in lines:
            c.drawString(72, y, line)
            y -= 18
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def letter_pdf_bytes() -> bytes:
    """A one-page clinical letter naming NHS number 943 476 5919."""
    return make_pdf(
        [
            "Dear Dr. Smith,",
            "Re: John Doe (NHS Number: 943 476 5919)",
            "I reviewed the above patient in clinic on 3 March.",
            "Diagnosis: type 2 diabetes. HbA1c 58 mmol/mol.",
        ]
    )


@pytest.fixture()
def no_identifier_pdf_bytes() -> bytes:
    """A letter with no NHS number anywhere in it."""
    return make_pdf(["Dear Dr. Smith,", "Thank you for seeing this patient."])


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    return make_pdf(["Page one content"], ["Page two content"])


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    return make_pdf([])


@pytest.fixture()
def page_wrapped_nhs_pdf_bytes() -> bytes:
    """An NHS number split across a page break."""
    return make_pdf(["NHS 943 476"], ["5919 follows"])
