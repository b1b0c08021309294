from __future__ import annotations

from pathlib import Path

from ...domain.store_models import StoreResult
from ...services.storage_service import DocumentStoreService


class StoreDocumentUseCase:
    """Use case for storing a single file from the intake directory."""

    def __init__(self, store: DocumentStoreService) -> None:
        self.store = store

    def execute(self, intake_dir: Path | str, file_name: str, root_dir: Path | str) -> StoreResult:
        """
        Execute the store document use case.

        Args:
            intake_dir: Directory holding the file
            file_name: Name of the file inside ``intake_dir``
            root_dir: Root of the document database

        Returns:
            StoreResult describing where the file went or why it was rejected
        """
        return self.store.store_one(intake_dir, file_name, root_dir)
