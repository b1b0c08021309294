from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ROOT_DIR = Path(__file__).resolve().parents[2]
ENV_PATH = ROOT_DIR / ".env"
load_dotenv(ENV_PATH, override=False)


class StorageSettings(BaseModel):
    """Where the document database and its inbox live on disk."""

    root_dir: Path = Path("docDB")
    intake_dir: Path = Path("docTemp")


class ValidationSettings(BaseModel):
    """Rules applied to incoming filenames."""

    allowed_extensions: tuple[str, ...] = ("xml", "csv", "json")
    # Two-digit years are read as century + yy
    century: int = Field(default=2000, ge=0)


class Settings(BaseSettings):
    """Global application configuration."""

    app_name: str = "Document Intake Database"
    log_level: str = "INFO"
    storage: StorageSettings = StorageSettings()
    validation: ValidationSettings = ValidationSettings()

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="allow",
    )


settings = Settings()
