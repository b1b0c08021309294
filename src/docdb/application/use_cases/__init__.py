from __future__ import annotations

from .list_documents_use_case import ListDocumentsUseCase
from .reset_database_use_case import ResetDatabaseUseCase
from .setup_database_use_case import SetupDatabaseUseCase
from .store_all_documents_use_case import StoreAllDocumentsUseCase
from .store_document_use_case import StoreDocumentUseCase

__all__ = [
    "SetupDatabaseUseCase",
    "StoreDocumentUseCase",
    "StoreAllDocumentsUseCase",
    "ListDocumentsUseCase",
    "ResetDatabaseUseCase",
]
