from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from .config import Settings, settings as default_settings
from .application.use_cases import (
    ListDocumentsUseCase,
    ResetDatabaseUseCase,
    SetupDatabaseUseCase,
    StoreAllDocumentsUseCase,
    StoreDocumentUseCase,
)
from .observability.logger import LoggingObservabilityRecorder
from .persistence.adapters.document_filesystem import FileSystemStoredDocumentRepository
from .persistence.adapters.filesystem import LocalFileStorage
from .services.lifecycle_service import DatabaseLifecycleService
from .services.storage_service import DocumentStoreService
from .services.validation_service import FilenameValidator


class AppContainer:
    """Application composition root wiring services, repositories, and adapters."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings
        self.root_dir = Path(self.settings.storage.root_dir)
        self.intake_dir = Path(self.settings.storage.intake_dir)

        self.observability = LoggingObservabilityRecorder()
        self.file_storage = LocalFileStorage()
        self.document_repository = FileSystemStoredDocumentRepository()

        self.validator = FilenameValidator(
            allowed_extensions=self.settings.validation.allowed_extensions,
            century=self.settings.validation.century,
            observability=self.observability,
        )
        self.document_store = DocumentStoreService(
            validator=self.validator,
            storage=self.file_storage,
            observability=self.observability,
        )
        self.lifecycle = DatabaseLifecycleService(
            storage=self.file_storage,
            observability=self.observability,
        )

        self.setup_database_use_case = SetupDatabaseUseCase(self.lifecycle)
        self.store_document_use_case = StoreDocumentUseCase(self.document_store)
        self.store_all_documents_use_case = StoreAllDocumentsUseCase(self.document_store)
        self.list_documents_use_case = ListDocumentsUseCase(self.document_repository)
        self.reset_database_use_case = ResetDatabaseUseCase(self.lifecycle)


@lru_cache
def get_app_container() -> AppContainer:
    """Return a cached container instance so FastAPI dependencies share services."""

    return AppContainer(Settings())
