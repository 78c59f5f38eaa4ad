# src/task_board/core/errors.py

from __future__ import annotations


class BoardError(Exception):
    """Base class for errors the board reports to the user."""


class ValidationError(BoardError):
    """Input rejected locally, before any remote call."""


class RemoteFailure(BoardError):
    """
    A remote task service call did not succeed.

    The message is the user-facing text for the failed operation
    (e.g. "Failed to fetch tasks"); the transport error, if any, is chained.
    """

    def __init__(self, message: str, *, operation: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code
