from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException
from fastapi.encoders import jsonable_encoder

from ..container import AppContainer, get_app_container
from ..domain.errors import ErrorKind

router = APIRouter()

_STATUS_BY_ERROR = {
    ErrorKind.SOURCE_MISSING: 404,
    ErrorKind.COPY_VERIFICATION_FAILED: 500,
}


def get_container() -> AppContainer:
    return get_app_container()


def _root(container: AppContainer, root_dir: str | None) -> Path:
    return Path(root_dir) if root_dir else container.root_dir


def _intake(container: AppContainer, intake_dir: str | None) -> Path:
    return Path(intake_dir) if intake_dir else container.intake_dir


@router.post("/database/setup")
async def setup_database(
    root_dir: str | None = None,
    intake_dir: str | None = None,
    container: AppContainer = Depends(get_container),
) -> dict:
    root, intake = _root(container, root_dir), _intake(container, intake_dir)
    container.setup_database_use_case.execute(root, intake)
    return {"root_dir": str(root), "intake_dir": str(intake)}


@router.post("/database/reset")
async def reset_database(
    root_dir: str | None = None,
    container: AppContainer = Depends(get_container),
) -> dict:
    report = container.reset_database_use_case.execute(_root(container, root_dir))
    return {
        "root_dir": str(report.root_dir),
        "existed": report.existed,
        "removed_entries": report.removed_entries,
        "message": report.message,
    }


@router.get("/validate/{file_name}")
async def validate_file_name(
    file_name: str,
    container: AppContainer = Depends(get_container),
) -> dict:
    return container.validator.check(file_name).model_dump(mode="json")


@router.post("/intake/store-all")
async def store_all_documents(
    root_dir: str | None = None,
    intake_dir: str | None = None,
    container: AppContainer = Depends(get_container),
) -> dict:
    report = container.store_all_documents_use_case.execute(
        _intake(container, intake_dir), _root(container, root_dir)
    )
    return jsonable_encoder(report)


@router.post("/intake/{file_name}/store")
async def store_document(
    file_name: str,
    root_dir: str | None = None,
    intake_dir: str | None = None,
    container: AppContainer = Depends(get_container),
) -> dict:
    """Store one intake file; failures map to 400/404/500 with the diagnostic as detail."""
    result = container.store_document_use_case.execute(
        _intake(container, intake_dir), file_name, _root(container, root_dir)
    )
    if not result.stored:
        raise HTTPException(
            status_code=_STATUS_BY_ERROR.get(result.error, 400),
            detail={"error": result.error.value if result.error else None, "message": result.message},
        )
    return jsonable_encoder(result)


@router.get("/documents")
async def list_documents(
    root_dir: str | None = None,
    container: AppContainer = Depends(get_container),
) -> list[dict]:
    documents = container.list_documents_use_case.execute(_root(container, root_dir))
    return [doc.model_dump(mode="json") for doc in documents]
