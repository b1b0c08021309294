from __future__ import annotations

from pathlib import Path

from ...services.lifecycle_service import DatabaseLifecycleService


class SetupDatabaseUseCase:
    """Use case for creating the root and intake directories."""

    def __init__(self, lifecycle: DatabaseLifecycleService) -> None:
        self.lifecycle = lifecycle

    def execute(self, root_dir: Path | str, intake_dir: Path | str) -> None:
        self.lifecycle.setup(root_dir, intake_dir)
