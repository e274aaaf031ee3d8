"""Default display strategy backed by a dedicated asyncio event loop."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from .ports.strategy import IToastStrategy
from .request import ToastDuration

if TYPE_CHECKING:
    from .ports.context import IProcessContext
    from .request import DisplayRequest

logger = logging.getLogger(__name__)

DEFAULT_DURATIONS: Mapping[ToastDuration, float] = {
    ToastDuration.SHORT: 2.0,
    ToastDuration.LONG: 3.5,
}


@runtime_checkable
class ToastRenderer(Protocol):
    """Draws and removes a toast; always called on the display loop."""

    def present(self, request: DisplayRequest) -> None: ...

    def dismiss(self, request: DisplayRequest) -> None: ...


class LoggingRenderer:
    """Renderer that writes toasts to the ``toastkit.display`` logger."""

    def __init__(self, logger_name: str = "toastkit.display") -> None:
        self._log = logging.getLogger(logger_name)

    def present(self, request: DisplayRequest) -> None:
        self._log.info("%s", request.text)

    def dismiss(self, request: DisplayRequest) -> None:
        self._log.debug("Dismissed toast %r", request.text)


class ToastStrategy(IToastStrategy):
    """
    Shows one toast at a time on a display-owning event loop.

    Calls from any thread are marshalled onto the loop. A newer request
    replaces a pending one, and a toast being presented replaces the
    visible one, so toasts never stack. Visible toasts dismiss themselves
    after the duration mapped in ``durations``.

    Without an explicit ``loop`` the strategy starts its own loop in a
    daemon thread, exactly once, the first time it is registered or used.
    """

    close_timeout = 1.0

    def __init__(
        self,
        renderer: ToastRenderer | None = None,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
        durations: Mapping[ToastDuration, float] | None = None,
    ) -> None:
        self.renderer = renderer or LoggingRenderer()
        self._loop = loop
        self._owns_loop = loop is None
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()
        self._started = False
        self._durations = dict(durations or DEFAULT_DURATIONS)
        self._context: IProcessContext | None = None
        self._pending: asyncio.TimerHandle | None = None
        self._expiry: asyncio.TimerHandle | None = None
        self._visible: DisplayRequest | None = None

    @property
    def context(self) -> IProcessContext | None:
        return self._context

    @property
    def visible(self) -> DisplayRequest | None:
        return self._visible

    def register_strategy(self, context: IProcessContext) -> None:
        self._context = context
        self._ensure_loop()
        logger.debug("Registered %s against %r", type(self).__name__, context)

    def show_toast(self, request: DisplayRequest) -> None:
        request.ensure_resolved()
        self._ensure_loop().call_soon_threadsafe(self._schedule, request)

    def cancel_toast(self) -> None:
        if self._loop is None:
            return
        self._loop.call_soon_threadsafe(self._cancel_all)

    def close(self) -> None:
        """Stop the loop this strategy started, if any."""
        with self._lock:
            if not self._owns_loop or self._loop is None:
                return
            loop, thread = self._loop, self._thread
            loop.call_soon_threadsafe(self._cancel_all)
            loop.call_soon_threadsafe(loop.stop)
            if thread is not None:
                thread.join(timeout=self.close_timeout)
            if thread is not None and thread.is_alive():
                logger.warning(
                    "Display thread did not stop within %ss; leaving its loop open",
                    self.close_timeout,
                )
            else:
                loop.close()
            self._loop = None
            self._thread = None
            self._started = False

    def _ensure_loop(self) -> asyncio.AbstractEventLoop:
        with self._lock:
            if self._loop is None:
                self._loop = asyncio.new_event_loop()
            if self._owns_loop and not self._started:
                self._thread = threading.Thread(
                    target=self._run_loop,
                    args=(self._loop,),
                    name="toastkit-display",
                    daemon=True,
                )
                self._thread.start()
                self._started = True
            return self._loop

    def _run_loop(self, loop: asyncio.AbstractEventLoop) -> None:
        asyncio.set_event_loop(loop)
        loop.run_forever()

    # ── Loop-side operations ─────────────────────────────────────────

    def _schedule(self, request: DisplayRequest) -> None:
        self._cancel_pending()
        if request.delay_millis > 0:
            assert self._loop is not None
            self._pending = self._loop.call_later(
                request.delay_millis / 1000, self._present, request
            )
        else:
            self._present(request)

    def _present(self, request: DisplayRequest) -> None:
        self._pending = None
        self._dismiss_visible()
        self.renderer.present(request)
        self._visible = request
        assert self._loop is not None
        self._expiry = self._loop.call_later(
            self._durations[request.duration], self._expire, request
        )
        logger.debug("Showing toast %r for %s", request.text, request.duration.name)

    def _expire(self, request: DisplayRequest) -> None:
        self._expiry = None
        if self._visible is request:
            self._visible = None
            self.renderer.dismiss(request)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def _dismiss_visible(self) -> None:
        if self._expiry is not None:
            self._expiry.cancel()
            self._expiry = None
        if self._visible is not None:
            visible, self._visible = self._visible, None
            self.renderer.dismiss(visible)

    def _cancel_all(self) -> None:
        self._cancel_pending()
        self._dismiss_visible()
        logger.debug("Cancelled toasts")
