import pymupdf

from letter_worker.pdf.base import BasePdfExtractor
from letter_worker.pdf.exceptions import DecodeError


class PyMuPdfAdapter(BasePdfExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> str:
        if not pdf_bytes:
            raise DecodeError("pymupdf extraction failed: empty document")
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text().rstrip("\n") for page in doc]
        except Exception as exc:
            raise DecodeError(f"pymupdf extraction failed: {exc}") from exc
        return "\n".join(pages).strip()
