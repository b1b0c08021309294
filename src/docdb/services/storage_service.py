from __future__ import annotations

import logging
from pathlib import Path

from ..application.interfaces import NullObservabilityRecorder, ObservabilityRecorder
from ..domain.errors import CopyVerificationFailed, DocumentNameError, DocumentStoreError, SourceMissing
from ..domain.naming import derive_path
from ..domain.store_models import BatchReport, StoreResult
from ..persistence.ports import FileStorage
from .validation_service import FilenameValidator

logger = logging.getLogger(__name__)


class DocumentStoreService:
    """Moves validated intake files into the ``root/first_day/extension/customer`` tree.

    Files are handled strictly one at a time. A stored copy only counts once
    it exists and has the same byte length as its source; nothing is retried.
    """

    def __init__(
        self,
        *,
        validator: FilenameValidator,
        storage: FileStorage,
        observability: ObservabilityRecorder | None = None,
    ) -> None:
        self.validator = validator
        self.storage = storage
        self.observability = observability or NullObservabilityRecorder()

    def store_one(self, intake_dir: Path | str, file_name: str, root_dir: Path | str) -> StoreResult:
        """Store one intake file, returning a failed result instead of raising."""
        try:
            destination = self._store(Path(intake_dir), file_name, Path(root_dir))
        except DocumentNameError as exc:
            # already reported by the validator
            return StoreResult.failure(exc)
        except DocumentStoreError as exc:
            logger.error(exc.message)
            self.observability.record_event(
                stage="store_failed",
                details={"file_name": file_name, "error": exc.kind.value},
                level="debug",
            )
            return StoreResult.failure(exc)

        result = StoreResult.success(file_name, destination)
        logger.info(result.message)
        self.observability.record_event(
            stage="document_stored",
            details={"file_name": file_name, "destination": str(destination)},
            level="debug",
        )
        return result

    def store_all(self, intake_dir: Path | str, root_dir: Path | str) -> BatchReport:
        """Store every entry of ``intake_dir``, deleting each source once stored."""
        intake = Path(intake_dir)
        report = BatchReport()
        if not self.storage.is_dir(intake):
            logger.warning("The intake directory '%s' does not exist", intake)
            file_names: list[str] = []
        else:
            file_names = self.storage.list_entries(intake)

        for file_name in file_names:
            result = self.store_one(intake, file_name, root_dir)
            if result.stored:
                self._remove_source(intake / file_name)
            report.record(result)

        logger.info("Successfully processed %d files", report.success_count)
        if report.failed_files:
            logger.info("These files were not processed:\n%s", "\n".join(report.failed_files))
        self.observability.record_event(
            stage="batch_completed",
            details={
                "intake_dir": str(intake),
                "success_count": report.success_count,
                "failed_files": report.failed_files,
            },
        )
        return report

    def _store(self, intake_dir: Path, file_name: str, root_dir: Path) -> Path:
        fields = self.validator.validate(file_name)

        target_dir = derive_path(root_dir, fields.first_day, fields.extension)
        self.storage.ensure_dir(target_dir)

        source = intake_dir / file_name
        if not self.storage.exists(source):
            raise SourceMissing(file_name, f"The intake file '{source}' does not exist")
        destination = target_dir / fields.customer

        try:
            self.storage.copy(source, destination)
        except OSError as exc:
            raise CopyVerificationFailed(
                file_name, f"Error copying file '{file_name}': {exc}"
            ) from exc

        if not self.storage.exists(destination) or self.storage.size(source) != self.storage.size(destination):
            raise CopyVerificationFailed(file_name, f"The storage of file '{file_name}' failed")
        logger.debug("Copied %s -> %s", source, destination)
        return destination

    def _remove_source(self, source: Path) -> None:
        try:
            self.storage.remove(source)
        except OSError as exc:
            logger.warning("Stored %s but could not remove it from intake: %s", source.name, exc)
