class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class StepAbortedError(ProcessorError):
    """Raised by a step that stops the pipeline without an underlying exception."""
