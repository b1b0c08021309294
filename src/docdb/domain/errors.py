"""Failure taxonomy for the document database.

Every failure is local to one file. Validation errors are raised before any
filesystem access; I/O errors are raised while a validated file is being
stored. Services convert them into :class:`StoreResult` objects so a batch
never aborts on a single bad file.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MALFORMED_NAME = "MalformedName"
    UNSUPPORTED_EXTENSION = "UnsupportedExtension"
    BAD_DATE_FORMAT = "BadDateFormat"
    INVALID_DATE = "InvalidDate"
    DATE_ORDER = "DateOrderError"
    SOURCE_MISSING = "SourceMissing"
    COPY_VERIFICATION_FAILED = "CopyVerificationFailed"


class DocumentStoreError(Exception):
    """Base class for every per-file failure."""

    kind: ErrorKind

    def __init__(self, file_name: str, message: str) -> None:
        super().__init__(message)
        self.file_name = file_name
        self.message = message


class DocumentNameError(DocumentStoreError):
    """Raised when a filename breaks the naming contract."""


class MalformedName(DocumentNameError):
    kind = ErrorKind.MALFORMED_NAME


class UnsupportedExtension(DocumentNameError):
    kind = ErrorKind.UNSUPPORTED_EXTENSION


class BadDateFormat(DocumentNameError):
    kind = ErrorKind.BAD_DATE_FORMAT


class InvalidDate(DocumentNameError):
    kind = ErrorKind.INVALID_DATE


class DateOrderError(DocumentNameError):
    kind = ErrorKind.DATE_ORDER


class SourceMissing(DocumentStoreError):
    kind = ErrorKind.SOURCE_MISSING


class CopyVerificationFailed(DocumentStoreError):
    kind = ErrorKind.COPY_VERIFICATION_FAILED
