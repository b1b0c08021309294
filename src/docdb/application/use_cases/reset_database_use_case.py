from __future__ import annotations

from pathlib import Path

from ...domain.store_models import ResetReport
from ...services.lifecycle_service import DatabaseLifecycleService


class ResetDatabaseUseCase:
    """Use case for emptying the document database."""

    def __init__(self, lifecycle: DatabaseLifecycleService) -> None:
        self.lifecycle = lifecycle

    def execute(self, root_dir: Path | str) -> ResetReport:
        return self.lifecycle.reset(root_dir)
