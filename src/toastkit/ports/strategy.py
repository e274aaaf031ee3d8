"""Display strategy port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..request import DisplayRequest
    from .context import IProcessContext


@runtime_checkable
class IToastStrategy(Protocol):
    """
    Owns the show/cancel lifecycle against the display platform.

    ``show_toast`` is fire-and-forget: it returns immediately and the
    toast must not become visible before ``request.delay_millis`` elapses.

    Implementations: ToastStrategy, InMemoryStrategy, ConsoleStrategy.
    """

    def register_strategy(self, context: IProcessContext) -> None:
        """Bind to the process context; called every time it is installed."""
        ...

    def show_toast(self, request: DisplayRequest) -> None:
        """Schedule a fully resolved request for display."""
        ...

    def cancel_toast(self) -> None:
        """Cancel whatever is currently visible or pending."""
        ...
