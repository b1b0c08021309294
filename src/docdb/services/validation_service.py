from __future__ import annotations

import logging
from typing import Iterable

from ..application.interfaces import NullObservabilityRecorder, ObservabilityRecorder
from ..domain.errors import DocumentNameError
from ..domain.models import DocumentName, NameCheck
from ..domain.naming import DEFAULT_CENTURY, DEFAULT_EXTENSIONS, parse_document_name

logger = logging.getLogger(__name__)


class FilenameValidator:
    """Gates intake files on the ``Customer.DDMMYY.DDMMYY.ext`` naming contract."""

    def __init__(
        self,
        *,
        allowed_extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        century: int = DEFAULT_CENTURY,
        observability: ObservabilityRecorder | None = None,
    ) -> None:
        self.allowed_extensions = tuple(allowed_extensions)
        self.century = century
        self.observability = observability or NullObservabilityRecorder()

    def validate(self, file_name: str) -> DocumentName:
        """Return the parsed fields of ``file_name``.

        Raises:
            DocumentNameError: the subclass matching the first rule broken
        """
        try:
            return parse_document_name(file_name, self.allowed_extensions, self.century)
        except DocumentNameError as exc:
            logger.warning(exc.message)
            self.observability.record_event(
                stage="validation_failed",
                details={"file_name": file_name, "error": exc.kind.value},
                level="debug",
            )
            raise

    def check(self, file_name: str) -> NameCheck:
        try:
            fields = self.validate(file_name)
        except DocumentNameError as exc:
            return NameCheck(file_name=file_name, ok=False, error=exc.kind, message=exc.message)
        return NameCheck(file_name=file_name, ok=True, fields=fields)

    def is_valid(self, file_name: str) -> bool:
        return self.check(file_name).ok
