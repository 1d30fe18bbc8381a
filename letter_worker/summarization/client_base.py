from abc import ABC, abstractmethod


class BaseSummaryClient(ABC):
    """Contract for provider-specific text generation clients."""

    @abstractmethod
    def create_message(
        self,
        *,
        model: str,
        max_tokens: int,
        user_prompt: str,
    ) -> str:
        """Return the provider's text response.

        Raises:
            GenerationNetworkError: when the provider cannot be reached.
            GenerationError: when the response has no text content.
        """
