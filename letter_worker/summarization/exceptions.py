class GenerationError(Exception):
    """Raised when summary generation fails."""

    reason = "generation_failed"


class GenerationNetworkError(GenerationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
