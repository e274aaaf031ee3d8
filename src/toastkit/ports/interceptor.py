"""Interception gate port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..request import DisplayRequest


@runtime_checkable
class IToastInterceptor(Protocol):
    """Protocol for filters that may suppress a toast before display."""

    def intercept(self, request: DisplayRequest) -> bool:
        """Return True to suppress the request."""
        ...
