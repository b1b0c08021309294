"""Result records for store, batch and reset operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .errors import DocumentStoreError, ErrorKind


@dataclass
class StoreResult:
    """Outcome of storing a single intake file.

    Attributes:
        file_name: Name of the file in the intake directory
        stored: True once the copy exists and matches the source size
        destination: Where the document was written (set on success)
        error: Failure kind when ``stored`` is False
        message: Human-readable diagnostic naming the file and rule
    """

    file_name: str
    stored: bool
    destination: Path | None = None
    error: ErrorKind | None = None
    message: str | None = None

    @classmethod
    def success(cls, file_name: str, destination: Path) -> "StoreResult":
        return cls(
            file_name=file_name,
            stored=True,
            destination=destination,
            message=f"The storage of file '{file_name}' is successful",
        )

    @classmethod
    def failure(cls, error: DocumentStoreError) -> "StoreResult":
        return cls(
            file_name=error.file_name,
            stored=False,
            error=error.kind,
            message=error.message,
        )


@dataclass
class BatchReport:
    """Aggregate outcome of processing a whole intake directory."""

    success_count: int = 0
    failed_files: list[str] = field(default_factory=list)
    results: list[StoreResult] = field(default_factory=list)

    def record(self, result: StoreResult) -> None:
        self.results.append(result)
        if result.stored:
            self.success_count += 1
        else:
            self.failed_files.append(result.file_name)

    @property
    def total(self) -> int:
        return len(self.results)


@dataclass
class ResetReport:
    root_dir: Path
    existed: bool
    removed_entries: int = 0

    @property
    def message(self) -> str:
        if self.existed:
            return f"Reset completed for {self.root_dir}"
        return f"Directory '{self.root_dir}' does not exist."
