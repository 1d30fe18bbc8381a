from letter_worker.config.settings import Settings
from letter_worker.summarization.base import BaseSummarizer
from letter_worker.summarization.client_base import BaseSummaryClient
from letter_worker.summarization.anthropic_client_adapter import AnthropicClientAdapter
from letter_worker.summarization.example_client_adapter import ExampleClientAdapter
from letter_worker.summarization.openai_client_adapter import OpenAIClientAdapter
from letter_worker.summarization.summarizer import Summarizer


class SummarizerFactory:
    """Creates the configured summarizer."""

    PROVIDERS = ("anthropic", "openai", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseSummarizer:
        """Create a configured summarizer from application settings."""
        provider = settings.summary_provider.lower()
        client, model = cls._create_client(provider, settings)
        return Summarizer(
            client=client,
            model=model,
            max_tokens=settings.summary_max_tokens,
            max_input_chars=settings.summary_max_input_chars,
        )

    @classmethod
    def _create_client(
        cls, provider: str, settings: Settings
    ) -> tuple[BaseSummaryClient, str]:
        if provider == "anthropic":
            client: BaseSummaryClient = AnthropicClientAdapter(
                api_key=settings.anthropic_api_key,
                timeout_seconds=settings.anthropic_timeout_seconds,
            )
            return client, settings.anthropic_model_name
        if provider == "openai":
            if not settings.openai_model_name:
                raise ValueError("openai_model_name is required for summary_provider=openai")
            client = OpenAIClientAdapter(
                api_key=settings.openai_api_key,
                timeout_seconds=settings.openai_timeout_seconds,
            )
            return client, settings.openai_model_name
        if provider == "example":
            return ExampleClientAdapter(), "example"
        raise ValueError(
            f"Unknown summary provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
