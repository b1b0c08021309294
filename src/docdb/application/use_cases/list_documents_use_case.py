from __future__ import annotations

from pathlib import Path

from ...domain.models import StoredDocument
from ...persistence.ports import StoredDocumentRepository


class ListDocumentsUseCase:
    """Use case for listing every document in the database."""

    def __init__(self, repository: StoredDocumentRepository) -> None:
        self.repository = repository

    def execute(self, root_dir: Path | str) -> list[StoredDocument]:
        """
        Execute the list documents use case.

        Returns:
            Stored documents under ``root_dir``, ordered by path
        """
        return self.repository.list(Path(root_dir))
