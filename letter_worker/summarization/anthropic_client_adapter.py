import anthropic
import httpx

from letter_worker.summarization.client_base import BaseSummaryClient
from letter_worker.summarization.exceptions import GenerationError, GenerationNetworkError


class AnthropicClientAdapter(BaseSummaryClient):
    """Summary client built on the Anthropic Messages API."""

    def __init__(self, *, api_key: str, timeout_seconds: int) -> None:
        self._client = anthropic.Anthropic(
            api_key=api_key,
            timeout=timeout_seconds,
            max_retries=0,
        )

    def create_message(
        self,
        *,
        model: str,
        max_tokens: int,
        user_prompt: str,
    ) -> str:
        try:
            message = self._client.messages.create(
                model=model,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except (anthropic.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise GenerationNetworkError(f"AI provider network error: {exc}") from exc
        except anthropic.APIError as exc:
            raise GenerationNetworkError(f"AI provider API error: {exc}") from exc

        if not message.content:
            raise GenerationError("AI returned no content")
        block = message.content[0]
        if block.type != "text":
            raise GenerationError(
                f"Unexpected response format from AI provider: {block.type}"
            )
        return block.text
