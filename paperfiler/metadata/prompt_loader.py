from pathlib import Path

from paperfiler.metadata.exceptions import MetadataError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_system_prompt(path: Path | None = None) -> str:
    """Load the metadata extraction instruction sent as the system message.

    Args:
        path: Path to the prompt file.
              Defaults to the bundled metadata_prompt.txt.

    Raises:
        MetadataError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "metadata_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise MetadataError(f"Failed to load system prompt: {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the JSON schema describing the expected model response.

    Args:
        path: Path to the JSON schema file.
              Defaults to the bundled metadata_schema.json.

    Raises:
        MetadataError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "metadata_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise MetadataError(f"Failed to load JSON schema: {exc}") from exc
