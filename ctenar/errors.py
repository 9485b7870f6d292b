"""Domain exceptions for reader and CLI diagnostics."""

from __future__ import annotations


class ReaderStageError(RuntimeError):
    """Raised when a specific reader stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped reader error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class SpeechUnavailableError(RuntimeError):
    """Raised when no speech-synthesis capability exists in the runtime."""

    def __init__(self, reason: str) -> None:
        """Initialize with a user-facing reason."""

        super().__init__(reason)
        self.reason = reason
