import io

import pdfplumber

from letter_worker.pdf.base import BasePdfExtractor
from letter_worker.pdf.exceptions import DecodeError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, pdf_bytes: bytes) -> str:
        if not pdf_bytes:
            raise DecodeError("pdfplumber extraction failed: empty document")
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise DecodeError(f"pdfplumber extraction failed: {exc}") from exc
        return "\n".join(pages).strip()
