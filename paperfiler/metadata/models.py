from dataclasses import dataclass

FIELD_NAMES = ("author", "title", "year", "journal", "volume", "issue", "starting_page")


@dataclass(frozen=True)
class BibliographicRecord:
    """Citation fields extracted by the model. Unknown fields are empty strings."""

    author: str = ""
    title: str = ""
    year: str = ""
    journal: str = ""
    volume: str = ""
    issue: str = ""
    starting_page: str = ""


@dataclass(frozen=True)
class ResolvedMetadata:
    """Successful resolution: parsed record, raw model text and synthesized name."""

    record: BibliographicRecord
    raw_response: str
    filename: str


@dataclass(frozen=True)
class MetadataFailure:
    """Failed resolution. raw_response holds whatever the model returned, if anything."""

    reason: str
    raw_response: str = ""


MetadataResult = ResolvedMetadata | MetadataFailure
