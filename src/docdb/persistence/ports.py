from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..domain.models import StoredDocument


class FileStorage(Protocol):
    """Port describing the filesystem primitives the document database needs."""

    def ensure_dir(self, path: Path) -> None:
        """Create ``path`` and any missing parents; no error if present."""

    def exists(self, path: Path) -> bool:
        """Return True if ``path`` exists."""

    def is_dir(self, path: Path) -> bool:
        """Return True if ``path`` is an existing directory."""

    def size(self, path: Path) -> int:
        """Return the byte length of the file at ``path``."""

    def copy(self, source: Path, destination: Path) -> None:
        """Copy ``source`` to ``destination``, overwriting it if present."""

    def remove(self, path: Path) -> None:
        """Delete the file at ``path``."""

    def list_entries(self, directory: Path) -> list[str]:
        """Return the names of the entries directly inside ``directory``, skipping hidden (dot) names."""

    def clear_dir(self, directory: Path) -> int:
        """Delete everything inside ``directory`` and return how many entries were removed."""


class StoredDocumentRepository(Protocol):
    """Port describing how stored documents are enumerated."""

    def list(self, root_dir: Path) -> list[StoredDocument]:
        """Return every document under ``root_dir``."""
