"""In-memory strategy and interceptor for test assertions."""

from __future__ import annotations

import logging

from toastkit.ports.context import IProcessContext
from toastkit.ports.interceptor import IToastInterceptor
from toastkit.ports.strategy import IToastStrategy
from toastkit.request import DisplayRequest

logger = logging.getLogger(__name__)


class InMemoryStrategy(IToastStrategy):
    """
    Test double (Fake) that records registrations, shown requests and cancels.

    Requests are recorded as soon as they arrive; ``delay_millis`` is kept on
    the request for assertions rather than waited on.
    """

    def __init__(self) -> None:
        self.registrations: list[IProcessContext] = []
        self.shown: list[DisplayRequest] = []
        self.cancel_count = 0

    def register_strategy(self, context: IProcessContext) -> None:
        self.registrations.append(context)

    def show_toast(self, request: DisplayRequest) -> None:
        request.ensure_resolved()
        self.shown.append(request)

    def cancel_toast(self) -> None:
        self.cancel_count += 1

    @property
    def last(self) -> DisplayRequest:
        if not self.shown:
            raise AssertionError("No toast was shown.")
        return self.shown[-1]

    def assert_shown(self, text: str, count: int = 1) -> None:
        """Helper for test assertions."""
        matches = [r for r in self.shown if r.text == text]
        if len(matches) != count:
            raise AssertionError(
                f"Expected {count} toasts with text {text!r}, but found {len(matches)}."
            )

    def clear(self) -> None:
        """Forget shown requests and cancels; registrations are kept."""
        self.shown.clear()
        self.cancel_count = 0


class RecordingInterceptor(IToastInterceptor):
    """Records every request it sees and returns a fixed verdict."""

    def __init__(self, suppress: bool = False) -> None:
        self.suppress = suppress
        self.seen: list[DisplayRequest] = []

    def intercept(self, request: DisplayRequest) -> bool:
        self.seen.append(request)
        return self.suppress
