from typing import ClassVar

from letter_worker.config.settings import Settings
from letter_worker.pdf.base import BasePdfExtractor
from letter_worker.pdf.pdfplumber_adapter import PdfPlumberAdapter
from letter_worker.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the text extractor for the configured PDF engine."""

    ENGINES: ClassVar[dict[str, type[BasePdfExtractor]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        return cls.for_engine(settings.pdf_engine)

    @classmethod
    def for_engine(cls, engine: str) -> BasePdfExtractor:
        name = engine.strip().lower()
        try:
            return cls.ENGINES[name]()
        except KeyError:
            raise ValueError(
                f"Unknown PDF engine '{name}'. Choose from: {sorted(cls.ENGINES)}"
            ) from None
