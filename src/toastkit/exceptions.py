"""Exception hierarchy for toastkit."""

from __future__ import annotations


class ToastError(Exception):
    """Root exception for the toastkit package."""


class ToastNotInitializedError(ToastError):
    """Raised when the toaster is used before ``init`` has completed.

    Usage: ``show``, ``cancel``, ``set_gravity`` and ``set_view`` need the
    process context, strategy and style installed by ``Toaster.init``.
    """

    def __init__(self, operation: str, missing: str) -> None:
        self.operation = operation
        self.missing = missing
        super().__init__(
            f"Cannot {operation}: no {missing} configured, call Toaster.init() first"
        )


class InvalidRequestError(ToastError):
    """Raised when an unresolved request is handed to a display strategy."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"DisplayRequest.{field} is not resolved")
