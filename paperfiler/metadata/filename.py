import re

from paperfiler.metadata.models import BibliographicRecord

FIELD_SEPARATOR = ","
NAME_ORDER = ("author", "year", "title", "journal", "volume", "issue", "starting_page")

_WHITESPACE_RE = re.compile(r"\s+")


def synthesize_filename(record: BibliographicRecord) -> str:
    """Join non-empty fields in citation order with commas and drop all whitespace.

    >>> synthesize_filename(BibliographicRecord(author="Smith J", year="2001"))
    'SmithJ,2001'
    """
    values = (getattr(record, name) for name in NAME_ORDER)
    joined = FIELD_SEPARATOR.join(value for value in values if value.strip())
    return _WHITESPACE_RE.sub("", joined)
