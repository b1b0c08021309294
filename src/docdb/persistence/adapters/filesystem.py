from __future__ import annotations

import shutil
from pathlib import Path

from ..ports import FileStorage


class LocalFileStorage(FileStorage):
    """Filesystem primitives backed by the local disk."""

    def ensure_dir(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def size(self, path: Path) -> int:
        return Path(path).stat().st_size

    def copy(self, source: Path, destination: Path) -> None:
        shutil.copyfile(source, destination)

    def remove(self, path: Path) -> None:
        Path(path).unlink()

    def list_entries(self, directory: Path) -> list[str]:
        return sorted(entry.name for entry in Path(directory).iterdir() if not entry.name.startswith("."))

    def clear_dir(self, directory: Path) -> int:
        removed = 0
        for entry in sorted(Path(directory).iterdir()):
            if entry.is_dir() and not entry.is_symlink():
                shutil.rmtree(entry)
            else:
                entry.unlink()
            removed += 1
        return removed
