from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    log_file: str = ""

    input_dir: Path = Path("input")
    output_dir: Path = Path("output")

    page_limit: int = Field(default=1, ge=1)
    rasterize_dpi: int = Field(default=200, ge=36)
    pdf_engine: str = "pymupdf"
    keep_page_images: bool = False

    ocr_languages: str = "eng+jpn"
    ocr_timeout_seconds: int = 120

    metadata_provider: str = "openai"
    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_base_url: str | None = None
    openai_timeout_seconds: int = 60
    openai_temperature: float = 0.0

    max_concurrent_documents: int = Field(default=4, ge=1)
    open_output_folder: bool = True

    @field_validator("ocr_languages")
    @classmethod
    def _normalize_ocr_languages(cls, value: str) -> str:
        codes = [code.strip() for code in value.replace(",", "+").split("+")]
        codes = [code for code in codes if code]
        if not codes:
            raise ValueError("ocr_languages must name at least one Tesseract language")
        return "+".join(codes)

    @property
    def images_dir(self) -> Path:
        return self.output_dir / "images"

    @property
    def temp_images_dir(self) -> Path:
        return self.output_dir / "temp" / "images"

    @property
    def result_log_dir(self) -> Path:
        return self.output_dir / "openai_result_log"

    @property
    def pdf_output_dir(self) -> Path:
        return self.output_dir / "pdf"
