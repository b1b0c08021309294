"""Command line entry point for the document intake database.

    docdb setup
    docdb validate Client1.010124.020124.xml
    docdb store Client1.010124.020124.xml
    docdb store-all
    docdb list
    docdb reset
    docdb serve --port 8000

Directories default to STORAGE__ROOT_DIR / STORAGE__INTAKE_DIR and can be
overridden with --root-dir / --intake-dir.
"""
from __future__ import annotations

import argparse
from pathlib import Path

from .container import AppContainer
from .config import Settings
from .observability.logging_setup import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="docdb", description="Document intake database")
    ap.add_argument("--root-dir", default=None, help="storage hierarchy root")
    ap.add_argument("--intake-dir", default=None, help="inbox of files waiting to be stored")
    ap.add_argument("--log-level", default=None)
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("setup", help="create the root and intake directories")
    validate = sub.add_parser("validate", help="check filenames against the naming contract")
    validate.add_argument("file_names", nargs="+")
    store = sub.add_parser("store", help="store a single intake file")
    store.add_argument("file_name")
    sub.add_parser("store-all", help="store every file in the intake directory")
    sub.add_parser("list", help="list stored documents")
    sub.add_parser("reset", help="delete everything under the root directory")
    serve = sub.add_parser("serve", help="run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return ap.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    if args.command == "serve":
        import uvicorn

        uvicorn.run("src.docdb.main:app", host=args.host, port=args.port)
        return 0

    container = AppContainer(Settings())
    root = Path(args.root_dir) if args.root_dir else container.root_dir
    intake = Path(args.intake_dir) if args.intake_dir else container.intake_dir

    if args.command == "setup":
        container.setup_database_use_case.execute(root, intake)
        logger.info("Database ready: root=%s intake=%s", root, intake)
        return 0

    if args.command == "validate":
        checks = [container.validator.check(name) for name in args.file_names]
        for check in checks:
            if check.ok:
                logger.info("The file name '%s' is valid", check.file_name)
        return 0 if all(check.ok for check in checks) else 1

    if args.command == "store":
        result = container.store_document_use_case.execute(intake, args.file_name, root)
        return 0 if result.stored else 1

    if args.command == "store-all":
        report = container.store_all_documents_use_case.execute(intake, root)
        return 0 if not report.failed_files else 1

    if args.command == "list":
        documents = container.list_documents_use_case.execute(root)
        for doc in documents:
            print(f"{doc.first_day}/{doc.extension}/{doc.customer}\t{doc.size_bytes}")
        logger.info("%d documents stored under %s", len(documents), root)
        return 0

    container.reset_database_use_case.execute(root)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
