from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from src.docdb.container import get_app_container
from src.docdb.main import app


@pytest.fixture
def client(monkeypatch, root_dir, intake_dir):
    """Client whose container points at per-test directories."""
    monkeypatch.setenv("STORAGE__ROOT_DIR", str(root_dir))
    monkeypatch.setenv("STORAGE__INTAKE_DIR", str(intake_dir))
    get_app_container.cache_clear()
    yield TestClient(app)
    get_app_container.cache_clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_setup_uses_configured_directories(client, root_dir, intake_dir):
    response = client.post("/database/setup")

    assert response.status_code == 200
    assert response.json() == {"root_dir": str(root_dir), "intake_dir": str(intake_dir)}
    assert root_dir.is_dir() and intake_dir.is_dir()


def test_validate_reports_error_kind(client):
    ok = client.get("/validate/Client.110222.120222.xml").json()
    assert ok["ok"] is True
    assert ok["fields"]["first_day"] == "110222"

    bad = client.get("/validate/Client.120222.110222.xml").json()
    assert bad["ok"] is False
    assert bad["error"] == "DateOrderError"


def test_store_one_and_list(client, root_dir, make_intake_file):
    client.post("/database/setup")
    make_intake_file("Client1.010124.020124.xml")

    response = client.post("/intake/Client1.010124.020124.xml/store")

    assert response.status_code == 200
    body = response.json()
    assert body["stored"] is True
    assert body["destination"] == str(root_dir / "010124" / "xml" / "Client1")

    documents = client.get("/documents").json()
    assert [(d["first_day"], d["extension"], d["customer"]) for d in documents] == [("010124", "xml", "Client1")]


def test_store_one_error_status_codes(client, make_intake_file):
    client.post("/database/setup")
    make_intake_file("Bad.File.Name.txt")

    invalid = client.post("/intake/Bad.File.Name.txt/store")
    assert invalid.status_code == 400
    assert invalid.json()["detail"]["error"] == "UnsupportedExtension"

    missing = client.post("/intake/Client20.310114.310114.xml/store")
    assert missing.status_code == 404
    assert missing.json()["detail"]["error"] == "SourceMissing"


def test_store_all_then_reset(client, root_dir, intake_dir, make_intake_file):
    client.post("/database/setup")
    make_intake_file("Client1.010124.020124.xml")
    make_intake_file("Bad.File.Name.txt")

    report = client.post("/intake/store-all").json()
    assert report["success_count"] == 1
    assert report["failed_files"] == ["Bad.File.Name.txt"]
    assert [r["error"] for r in report["results"]] == ["UnsupportedExtension", None]

    reset = client.post("/database/reset").json()
    assert reset["existed"] is True
    assert reset["removed_entries"] == 1
    assert list(root_dir.iterdir()) == []
    assert (intake_dir / "Bad.File.Name.txt").exists()


def test_directories_can_be_overridden_per_request(client, tmp_path):
    other_root = tmp_path / "elsewhere"

    response = client.post("/database/reset", params={"root_dir": str(other_root)})

    assert response.json()["existed"] is False
    assert response.json()["message"] == f"Directory '{other_root}' does not exist."
