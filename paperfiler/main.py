import sys

from paperfiler.config.settings import Settings
from paperfiler.logging.logger import Log
from paperfiler.processor.processor import build_processor
from paperfiler.worker.batch_runner import BatchRunner
from paperfiler.worker.folder_opener import NullFolderOpener, SystemFolderOpener


def main() -> None:
    """Entry point: load settings -> build dependencies -> run one batch."""
    settings = Settings()
    Log.configure(settings.log_level, settings.log_file or None)

    processor = build_processor(settings)
    folder_opener = (
        SystemFolderOpener() if settings.open_output_folder else NullFolderOpener()
    )
    summary = BatchRunner(processor, settings, folder_opener).run()
    sys.exit(1 if summary.failed else 0)


if __name__ == "__main__":
    main()
