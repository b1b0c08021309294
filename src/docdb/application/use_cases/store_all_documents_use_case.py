from __future__ import annotations

from pathlib import Path

from ...domain.store_models import BatchReport
from ...services.storage_service import DocumentStoreService


class StoreAllDocumentsUseCase:
    """Use case for draining the intake directory into the database."""

    def __init__(self, store: DocumentStoreService) -> None:
        self.store = store

    def execute(self, intake_dir: Path | str, root_dir: Path | str) -> BatchReport:
        return self.store.store_all(intake_dir, root_dir)
