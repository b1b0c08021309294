from __future__ import annotations

from src.docdb.application.use_cases import (
    ListDocumentsUseCase,
    ResetDatabaseUseCase,
    SetupDatabaseUseCase,
    StoreAllDocumentsUseCase,
    StoreDocumentUseCase,
)
from src.docdb.domain.errors import ErrorKind
from src.docdb.persistence.adapters.document_filesystem import FileSystemStoredDocumentRepository


class TestSetupDatabaseUseCase:
    def test_execute_creates_directories(self, lifecycle, root_dir, intake_dir):
        SetupDatabaseUseCase(lifecycle).execute(root_dir, intake_dir)

        assert root_dir.is_dir()
        assert intake_dir.is_dir()


class TestStoreDocumentUseCase:
    def test_execute_stores_valid_file(self, store_service, database, make_intake_file):
        root_dir, intake_dir = database
        make_intake_file("Client1.010124.020124.xml")

        result = StoreDocumentUseCase(store_service).execute(intake_dir, "Client1.010124.020124.xml", root_dir)

        assert result.stored is True
        assert (root_dir / "010124" / "xml" / "Client1").exists()

    def test_execute_rejects_invalid_file(self, store_service, database, make_intake_file):
        root_dir, intake_dir = database
        make_intake_file("Bad.File.Name.txt")

        result = StoreDocumentUseCase(store_service).execute(intake_dir, "Bad.File.Name.txt", root_dir)

        assert result.stored is False
        assert result.error is ErrorKind.UNSUPPORTED_EXTENSION


class TestStoreAllDocumentsUseCase:
    def test_execute_moves_valid_files(self, store_service, database, make_intake_file):
        root_dir, intake_dir = database
        make_intake_file("Client1.010124.020124.xml")
        make_intake_file("Client2.010124.010124.json")
        make_intake_file("Bad.File.Name.txt")

        report = StoreAllDocumentsUseCase(store_service).execute(intake_dir, root_dir)

        assert report.success_count == 2
        assert (root_dir / "010124" / "xml" / "Client1").exists()
        assert (root_dir / "010124" / "json" / "Client2").exists()
        assert not (intake_dir / "Client1.010124.020124.xml").exists()
        assert not (intake_dir / "Client2.010124.010124.json").exists()
        assert (intake_dir / "Bad.File.Name.txt").exists()


class TestListDocumentsUseCase:
    def test_execute_lists_what_was_stored(self, store_service, database, make_intake_file):
        root_dir, intake_dir = database
        make_intake_file("Client6.150115.150115.xml")
        make_intake_file("Client7.290115.290115.csv")
        store_service.store_all(intake_dir, root_dir)

        documents = ListDocumentsUseCase(FileSystemStoredDocumentRepository()).execute(root_dir)

        assert [(d.first_day, d.extension, d.customer) for d in documents] == [
            ("150115", "xml", "Client6"),
            ("290115", "csv", "Client7"),
        ]

    def test_execute_on_empty_database(self, database):
        root_dir, _ = database
        assert ListDocumentsUseCase(FileSystemStoredDocumentRepository()).execute(root_dir) == []


class TestResetDatabaseUseCase:
    def test_execute_clears_database(self, lifecycle, store_service, database, make_intake_file):
        root_dir, intake_dir = database
        make_intake_file("Client1.010124.020124.xml")
        store_service.store_one(intake_dir, "Client1.010124.020124.xml", root_dir)

        report = ResetDatabaseUseCase(lifecycle).execute(root_dir)

        assert report.existed is True
        assert list(root_dir.iterdir()) == []
