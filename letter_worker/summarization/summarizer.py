"""AI-powered clinical letter summarizer."""

from pathlib import Path

from letter_worker.logging.logger import Log
from letter_worker.summarization.base import BaseSummarizer
from letter_worker.summarization.client_base import BaseSummaryClient
from letter_worker.summarization.exceptions import GenerationError
from letter_worker.summarization.prompt_loader import load_prompt_template

DEFAULT_MAX_INPUT_CHARS = 10_000


class Summarizer(BaseSummarizer):
    """Summarizes letter text with a generative-text provider.

    Only the first ``max_input_chars`` characters of the letter are sent.
    The cut is a plain prefix slice and may fall mid-word; keeping it
    mechanical makes the submitted input reproducible.
    """

    def __init__(
        self,
        *,
        client: BaseSummaryClient,
        model: str,
        max_tokens: int = 1024,
        max_input_chars: int = DEFAULT_MAX_INPUT_CHARS,
        prompt_template_path: Path | None = None,
    ) -> None:
        if max_input_chars <= 0:
            raise ValueError("max_input_chars must be positive")
        self._client = client
        self._model = model
        self._max_tokens = max_tokens
        self._max_input_chars = max_input_chars
        self._prompt_template = load_prompt_template(prompt_template_path)

    def summarize(self, text: str) -> str:
        prompt = self._build_prompt(self.truncate(text))
        Log.debug(f"Summary prompt:\n{prompt}")

        summary = self._client.create_message(
            model=self._model,
            max_tokens=self._max_tokens,
            user_prompt=prompt,
        ).strip()
        if not summary:
            raise GenerationError("AI returned an empty summary")

        Log.info(f"Summary generated: {len(summary)} chars")
        return summary

    def truncate(self, text: str) -> str:
        return text[: self._max_input_chars]

    def _build_prompt(self, text: str) -> str:
        return self._prompt_template.format(letter_text=text)
