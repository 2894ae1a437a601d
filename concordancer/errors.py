"""Domain exceptions for concordance construction and CLI diagnostics."""

from __future__ import annotations


class UnsupportedSortKey(ValueError):
    """Raised when a `(field, direction)` sort request is not supported."""

    def __init__(self, *, field: str, direction: str, detail: str | None = None) -> None:
        """Initialize an unsupported sort key error with the offending values."""

        message = detail or f"Unknown sort key `{field} {direction}`."
        super().__init__(message)
        self.field = field
        self.direction = direction
        self.detail = message


class ConcordanceStageError(RuntimeError):
    """Raised when a specific concordance run stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped run error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
