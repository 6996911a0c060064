"""Validates parsed model JSON and builds a BibliographicRecord."""

from typing import Any

from paperfiler.metadata.exceptions import MetadataValidationError
from paperfiler.metadata.models import FIELD_NAMES, BibliographicRecord


def validate_and_build(data: dict[str, Any]) -> BibliographicRecord:
    """Build a BibliographicRecord from the model's JSON object.

    Missing or null fields become empty strings and numbers are rendered as
    text (some providers ignore the schema and answer `"volume": 71`).

    Raises:
        MetadataValidationError: if a field holds a list, object or boolean.
    """
    return BibliographicRecord(**{name: _coerce_field(data, name) for name in FIELD_NAMES})


def _coerce_field(data: dict[str, Any], name: str) -> str:
    raw = data.get(name)
    if raw is None:
        return ""
    if isinstance(raw, bool):
        raise MetadataValidationError(f"'{name}' must be a string, got boolean")
    if isinstance(raw, str):
        return raw.strip()
    if isinstance(raw, int):
        return str(raw)
    if isinstance(raw, float):
        return str(int(raw)) if raw.is_integer() else str(raw)
    raise MetadataValidationError(
        f"'{name}' must be a string, got {type(raw).__name__}"
    )
