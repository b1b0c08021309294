from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import ErrorKind


class DocumentName(BaseModel):
    """
    The four fields of a validated intake filename.

    A filename has the shape ``Customer.DDMMYY.DDMMYY.ext``. The raw strings
    are kept exactly as they appeared in the name: storage paths are built
    from ``first_day`` as written, not from a normalized date.

    Attributes:
        customer: First field; becomes the stored file's name
        first_day: Raw 6-character start of the covered period
        last_day: Raw 6-character end of the covered period
        extension: File type; selects the storage sub-directory
        first_date: ``first_day`` parsed as a calendar date
        last_date: ``last_day`` parsed as a calendar date
    """

    model_config = ConfigDict(frozen=True)

    customer: str
    first_day: str
    last_day: str
    extension: str
    first_date: date
    last_date: date

    @property
    def file_name(self) -> str:
        return ".".join((self.customer, self.first_day, self.last_day, self.extension))


class NameCheck(BaseModel):
    """Non-raising outcome of a filename check."""

    file_name: str
    ok: bool
    fields: Optional[DocumentName] = None
    error: Optional[ErrorKind] = None
    message: Optional[str] = None


class StoredDocument(BaseModel):
    """A document found in the storage hierarchy."""

    customer: str
    first_day: str
    extension: str
    path: Path
    size_bytes: int = Field(ge=0)
