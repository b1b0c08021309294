from __future__ import annotations

import os
from pathlib import Path

import pytest

# Pin settings before any application module is imported so a developer's
# .env never points the tests at a real database.
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.pop("STORAGE__ROOT_DIR", None)
os.environ.pop("STORAGE__INTAKE_DIR", None)

from src.docdb.application.interfaces import NullObservabilityRecorder  # noqa: E402
from src.docdb.persistence.adapters.filesystem import LocalFileStorage  # noqa: E402
from src.docdb.services.lifecycle_service import DatabaseLifecycleService  # noqa: E402
from src.docdb.services.storage_service import DocumentStoreService  # noqa: E402
from src.docdb.services.validation_service import FilenameValidator  # noqa: E402


@pytest.fixture
def root_dir(tmp_path: Path) -> Path:
    return tmp_path / "docDB"


@pytest.fixture
def intake_dir(tmp_path: Path) -> Path:
    return tmp_path / "docTemp"


@pytest.fixture
def validator() -> FilenameValidator:
    return FilenameValidator(observability=NullObservabilityRecorder())


@pytest.fixture
def storage() -> LocalFileStorage:
    return LocalFileStorage()


@pytest.fixture
def store_service(validator, storage) -> DocumentStoreService:
    return DocumentStoreService(validator=validator, storage=storage)


@pytest.fixture
def lifecycle(storage) -> DatabaseLifecycleService:
    return DatabaseLifecycleService(storage=storage)


@pytest.fixture
def database(lifecycle, root_dir, intake_dir):
    """Root and intake directories created the way ``setup`` does it."""
    lifecycle.setup(root_dir, intake_dir)
    return root_dir, intake_dir


@pytest.fixture
def make_intake_file(intake_dir: Path):
    """Write a file into the intake directory and return its path."""

    def _make(name: str, content: bytes = b"test\n") -> Path:
        intake_dir.mkdir(parents=True, exist_ok=True)
        path = intake_dir / name
        path.write_bytes(content)
        return path

    return _make
