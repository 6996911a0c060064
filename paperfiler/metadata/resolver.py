"""AI-powered bibliographic metadata resolver."""

import json
from pathlib import Path

from paperfiler.logging.logger import Log
from paperfiler.metadata.base import BaseMetadataResolver
from paperfiler.metadata.client_base import BaseMetadataClient
from paperfiler.metadata.exceptions import MetadataError
from paperfiler.metadata.filename import synthesize_filename
from paperfiler.metadata.models import MetadataFailure, MetadataResult, ResolvedMetadata
from paperfiler.metadata.prompt_loader import load_json_schema, load_system_prompt
from paperfiler.metadata.validator import validate_and_build


class MetadataResolver(BaseMetadataResolver):
    """Asks a chat model for the citation fields of an OCR'd article."""

    def __init__(
        self,
        *,
        client: BaseMetadataClient,
        model: str,
        temperature: float = 0.0,
        system_prompt_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._system_prompt = load_system_prompt(system_prompt_path)
        self._json_schema = json.loads(load_json_schema(json_schema_path))

    def resolve(self, text: str) -> MetadataResult:
        """Query the model once and parse its answer into a tagged result."""
        raw_response = ""
        try:
            raw_response = self._call_ai(text)
            Log.debug(f"AI raw response:\n{raw_response}")
            record = validate_and_build(self._parse_json(raw_response))
        except MetadataError as exc:
            Log.warning(f"Metadata resolution failed: {exc}")
            return MetadataFailure(reason=str(exc), raw_response=raw_response)
        except Exception as exc:
            Log.error(f"Unexpected metadata client error: {exc}")
            return MetadataFailure(
                reason=f"Unexpected metadata client error: {exc}",
                raw_response=raw_response,
            )

        filename = synthesize_filename(record)
        Log.info(f"Metadata resolved: {filename or '<no fields>'}")
        return ResolvedMetadata(record=record, raw_response=raw_response, filename=filename)

    def _call_ai(self, text: str) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=text,
            json_schema=self._json_schema,
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise MetadataError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise MetadataError("JSON response must be an object")
        return parsed
