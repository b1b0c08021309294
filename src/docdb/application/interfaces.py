from __future__ import annotations

from typing import Any, Mapping, Protocol


class ObservabilityRecorder(Protocol):
    """Port describing how domain events are emitted."""

    def record_event(
        self,
        stage: str,
        details: Mapping[str, Any] | None = None,
        level: str = "info",
    ) -> None:
        """Emit a structured event for the given stage.

        Args:
            stage: Name of the event (e.g. ``document_stored``)
            details: Optional structured details about the event
            level: Log level name the event should be reported at
        """


class NullObservabilityRecorder(ObservabilityRecorder):
    """No-op recorder used by default in tests and as a fallback."""

    def record_event(
        self,
        stage: str,
        details: Mapping[str, Any] | None = None,
        level: str = "info",
    ) -> None:  # noqa: D401
        """No-op implementation that does nothing."""
        return None
