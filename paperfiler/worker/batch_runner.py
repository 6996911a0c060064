from concurrent.futures import Future, ThreadPoolExecutor, as_completed

from paperfiler.config.settings import Settings
from paperfiler.logging.logger import Log
from paperfiler.processor.models import BatchSummary, Document, DocumentResult
from paperfiler.processor.processor import Processor
from paperfiler.scanner.file_scanner import scan_pdf_files
from paperfiler.worker.folder_opener import BaseFolderOpener, NullFolderOpener


class BatchRunner:
    """Fan out: one pipeline run per PDF on a bounded pool. Fan in: summary + open folder."""

    def __init__(
        self,
        processor: Processor,
        settings: Settings,
        folder_opener: BaseFolderOpener | None = None,
    ) -> None:
        self._processor = processor
        self._settings = settings
        self._folder_opener = folder_opener if folder_opener is not None else NullFolderOpener()

    def run(self) -> BatchSummary:
        """Process every PDF in the input directory and return per-document results."""
        self._prepare_output_dirs()
        documents = [Document(path=p) for p in scan_pdf_files(self._settings.input_dir)]
        if not documents:
            Log.info(f"No PDF files found in {self._settings.input_dir}")
            return BatchSummary()

        workers = min(self._settings.max_concurrent_documents, len(documents))
        Log.info(f"Processing {len(documents)} PDF file(s) with {workers} worker(s)")
        summary = BatchSummary()
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="doc") as executor:
            futures: dict[Future[DocumentResult], Document] = {
                executor.submit(self._processor.process, doc): doc for doc in documents
            }
            for future in as_completed(futures):
                summary.results.append(self._collect(future, futures[future]))

        self._report(summary)
        self._folder_opener.open(self._settings.pdf_output_dir)
        return summary

    def _prepare_output_dirs(self) -> None:
        for directory in (
            self._settings.images_dir,
            self._settings.temp_images_dir,
            self._settings.result_log_dir,
            self._settings.pdf_output_dir,
        ):
            directory.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _collect(future: Future[DocumentResult], document: Document) -> DocumentResult:
        try:
            return future.result()
        except Exception as exc:
            Log.error(f"Unexpected error while processing {document.filename}: {exc}")
            return DocumentResult.failed(document, None, str(exc))

    @staticmethod
    def _report(summary: BatchSummary) -> None:
        Log.info(
            f"Batch finished: {len(summary.succeeded)} succeeded, "
            f"{len(summary.failed)} failed"
        )
        for result in summary.failed:
            stage = result.stage or "unexpected"
            Log.warning(f"  {result.document.filename}: failed at {stage}: {result.reason}")
