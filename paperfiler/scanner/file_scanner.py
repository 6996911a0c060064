from pathlib import Path

from paperfiler.logging.logger import Log

PDF_EXTENSION = ".pdf"


def scan_pdf_files(input_dir: Path) -> list[Path]:
    """List PDF files (case-insensitive extension) directly under input_dir.

    An unreadable directory is logged and treated as an empty work set.
    """
    try:
        entries = list(input_dir.iterdir())
    except OSError as exc:
        Log.error(f"Cannot read input directory {input_dir}: {exc}")
        return []
    return sorted(
        (p for p in entries if p.is_file() and p.suffix.lower() == PDF_EXTENSION),
        key=lambda p: p.name,
    )
