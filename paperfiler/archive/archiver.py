import re
import shutil
import threading
from pathlib import Path

from paperfiler.archive.exceptions import ArchiveError
from paperfiler.logging.logger import Log
from paperfiler.metadata.models import ResolvedMetadata
from paperfiler.processor.models import ArchivedDocument, Document

RESULT_LOG_SUFFIX = ".pdf-result.txt"

_UNSAFE_CHARS_RE = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def safe_filename(name: str) -> str:
    """Replace characters that are illegal in file names on common platforms."""
    return _UNSAFE_CHARS_RE.sub("_", name).rstrip(". ")


class FileArchiver:
    """Writes the raw model response and moves the PDF under its new name.

    When the target name is taken, `_2`, `_3`, ... is appended to the stem.
    Name selection and the move are serialized so concurrent workers never
    claim the same name.
    """

    def __init__(self, pdf_dir: Path, log_dir: Path) -> None:
        self._pdf_dir = pdf_dir
        self._log_dir = log_dir
        self._lock = threading.Lock()

    def archive(self, metadata: ResolvedMetadata, document: Document) -> ArchivedDocument:
        """Persist the response log, then move the document into the PDF folder.

        Raises:
            ArchiveError: on any filesystem failure.
        """
        base_name = safe_filename(metadata.filename)
        if not base_name:
            Log.warning(
                f"No metadata fields for {document.filename}, keeping name {document.stem}"
            )
            base_name = document.stem

        try:
            with self._lock:
                self._pdf_dir.mkdir(parents=True, exist_ok=True)
                self._log_dir.mkdir(parents=True, exist_ok=True)
                pdf_path, log_path = self._free_targets(base_name, document.extension)
                log_path.write_text(metadata.raw_response, encoding="utf-8")
                try:
                    shutil.move(document.path, pdf_path)
                except OSError:
                    log_path.unlink(missing_ok=True)
                    raise
        except OSError as exc:
            raise ArchiveError(f"Failed to archive {document.filename}: {exc}") from exc

        Log.info(f"Moved {document.filename} -> {pdf_path.name}")
        return ArchivedDocument(pdf_path=pdf_path, log_path=log_path)

    def _free_targets(self, base_name: str, extension: str) -> tuple[Path, Path]:
        candidate = base_name
        counter = 1
        while True:
            pdf_path = self._pdf_dir / f"{candidate}{extension}"
            log_path = self._log_dir / f"{candidate}{RESULT_LOG_SUFFIX}"
            if not pdf_path.exists() and not log_path.exists():
                return pdf_path, log_path
            counter += 1
            candidate = f"{base_name}_{counter}"
