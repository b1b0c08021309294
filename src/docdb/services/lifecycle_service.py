from __future__ import annotations

import logging
from pathlib import Path

from ..application.interfaces import NullObservabilityRecorder, ObservabilityRecorder
from ..domain.store_models import ResetReport
from ..persistence.ports import FileStorage

logger = logging.getLogger(__name__)


class DatabaseLifecycleService:
    """Creates the root and intake directories and wipes the root back to empty."""

    def __init__(
        self,
        *,
        storage: FileStorage,
        observability: ObservabilityRecorder | None = None,
    ) -> None:
        self.storage = storage
        self.observability = observability or NullObservabilityRecorder()

    def setup(self, root_dir: Path | str, intake_dir: Path | str) -> None:
        root, intake = Path(root_dir), Path(intake_dir)
        for directory in (root, intake):
            self.storage.ensure_dir(directory)
        self.observability.record_event(
            stage="database_setup",
            details={"root_dir": str(root), "intake_dir": str(intake)},
        )

    def reset(self, root_dir: Path | str) -> ResetReport:
        """Delete everything under ``root_dir`` but keep the directory itself.

        Not atomic: an interruption can leave a partially cleared tree.
        """
        root = Path(root_dir)
        if not self.storage.is_dir(root):
            report = ResetReport(root_dir=root, existed=False)
            logger.info(report.message)
            return report

        removed = self.storage.clear_dir(root)
        report = ResetReport(root_dir=root, existed=True, removed_entries=removed)
        logger.info(report.message)
        self.observability.record_event(
            stage="database_reset",
            details={"root_dir": str(root), "removed_entries": removed},
        )
        return report
