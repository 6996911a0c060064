import httpx
import openai

from paperfiler.metadata.client_base import BaseMetadataClient
from paperfiler.metadata.exceptions import MetadataError, MetadataNetworkError


class OpenAIClientAdapter(BaseMetadataClient):
    """Metadata client adapter built on OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "bibliographic_record",
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise MetadataNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise MetadataNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise MetadataError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise MetadataError("AI returned empty response")
        return content
