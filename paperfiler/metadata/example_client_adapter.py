"""Example metadata client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseMetadataClient and register the provider in MetadataResolverFactory.
"""

import json
from typing import ClassVar

from paperfiler.metadata.client_base import BaseMetadataClient


class ExampleClientAdapter(BaseMetadataClient):
    """Example adapter that returns a fixed valid bibliographic JSON.

    No network calls. Useful for dry runs of the filing pipeline and in tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "title": "Example Article",
        "author": "Example Author",
        "year": "2000",
        "journal": "",
        "volume": "",
        "issue": "",
        "starting_page": "",
    }

    def __init__(self, response: dict[str, object] | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema
        return json.dumps(self._response, ensure_ascii=False)
