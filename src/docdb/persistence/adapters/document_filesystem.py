from __future__ import annotations

from pathlib import Path

from ...domain.models import StoredDocument
from ..ports import StoredDocumentRepository


class FileSystemStoredDocumentRepository(StoredDocumentRepository):
    """Reads stored documents back out of the ``root/first_day/extension/customer`` tree."""

    def list(self, root_dir: Path | str) -> list[StoredDocument]:
        root = Path(root_dir)
        if not root.is_dir():
            return []
        documents: list[StoredDocument] = []
        for path in sorted(root.glob("*/*/*")):
            if not path.is_file():
                continue
            ext_dir = path.parent
            documents.append(
                StoredDocument(
                    customer=path.name,
                    first_day=ext_dir.parent.name,
                    extension=ext_dir.name,
                    path=path,
                    size_bytes=path.stat().st_size,
                )
            )
        return documents
