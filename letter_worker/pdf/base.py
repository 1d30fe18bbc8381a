from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Pages are concatenated in order without page markers.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Extracted text of every page as a single string.

        Raises:
            DecodeError: if the bytes are not a parseable PDF.
        """
