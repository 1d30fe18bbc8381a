"""Offline summary client.

Returns a fixed summary without network calls. Useful for local development
and tests, and as a template for new provider adapters: implement
BaseSummaryClient and register the provider in SummarizerFactory.
"""

from letter_worker.summarization.client_base import BaseSummaryClient


class ExampleClientAdapter(BaseSummaryClient):
    """Adapter that always returns DEFAULT_SUMMARY."""

    DEFAULT_SUMMARY = (
        "Key diagnoses: none stated.\n"
        "Findings: none stated.\n"
        "Actions: none stated.\n"
        "Urgent concerns: none.\n"
        "Appointments: none stated."
    )

    def create_message(
        self,
        *,
        model: str,
        max_tokens: int,
        user_prompt: str,
    ) -> str:
        _ = model, max_tokens, user_prompt
        return self.DEFAULT_SUMMARY
