from abc import ABC, abstractmethod


class BaseSummarizer(ABC):
    """Contract for all letter summarizers."""

    @abstractmethod
    def summarize(self, text: str) -> str:
        """Produce a plain-text clinical summary of a letter.

        Args:
            text: Plain text extracted from the letter.

        Returns:
            Summary text with newlines preserved and no markup guarantees.

        Raises:
            GenerationError: on any failure.
        """
