"""Toaster — resolves toast calls into display requests and dispatches them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .config import ToastConfig
from .exceptions import ToastNotInitializedError
from .interceptors import ToastLogInterceptor
from .request import DisplayRequest, ToastDuration
from .resources import Found
from .strategy import ToastStrategy
from .style.base import DarkToastStyle
from .style.layout import CustomViewToastStyle
from .style.location import LocationToastStyle

if TYPE_CHECKING:
    from .ports.context import IProcessContext
    from .ports.interceptor import IToastInterceptor
    from .ports.strategy import IToastStrategy
    from .ports.style import IToastStyle

logger = logging.getLogger(__name__)


class Toaster:
    """
    Public entry point for showing toasts.

    Holds a :class:`ToastConfig` by reference; several toasters built on the
    same config share strategy, style, interceptor and debug flag.

    Every ``show`` goes through the same pipeline:

    1. empty text is dropped silently;
    2. missing strategy, interceptor and style are filled from the config;
    3. the interceptor may suppress the request;
    4. an unset duration is inferred from the text length;
    5. the request is handed to the strategy.
    """

    def __init__(self, config: ToastConfig | None = None) -> None:
        self.config = config or ToastConfig()

    def init(
        self,
        context: IProcessContext,
        strategy: IToastStrategy | None = None,
        style: IToastStyle | None = None,
    ) -> None:
        """Install the process context, then a strategy and a style."""
        self.config.context = context
        self.set_strategy(strategy or ToastStrategy())
        self.set_style(style or DarkToastStyle())

    def is_init(self) -> bool:
        return (
            self.config.context is not None
            and self.config.strategy is not None
            and self.config.style is not None
        )

    # ── Showing ──────────────────────────────────────────────────────

    def show(self, value: Any, delay_millis: int = 0) -> None:
        """
        Show a toast for text, a resource id, a ``DisplayRequest`` or any object.

        Integers are looked up as text resources and fall back to their
        decimal form when no resource matches. Other objects are shown via
        ``str()``; ``None`` shows ``"null"``. ``delay_millis`` is ignored
        for a ``DisplayRequest``, which carries its own delay; a negative
        delay is treated as no delay.
        """
        if isinstance(value, DisplayRequest):
            self._dispatch(value)
            return
        text = self._normalize(value)
        if delay_millis < 0:
            logger.warning("Negative toast delay %sms treated as 0", delay_millis)
            delay_millis = 0
        self._dispatch(DisplayRequest(text=text, delay_millis=delay_millis))

    def delayed_show(self, value: Any, delay_millis: int) -> None:
        self.show(value, delay_millis)

    def debug_show(self, value: Any) -> None:
        """Show only while debug mode is on; otherwise do nothing at all."""
        if not self.is_debug_mode():
            return
        self.show(value)

    def cancel(self) -> None:
        self._require_strategy("cancel").cancel_toast()

    def _normalize(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        if value is None:
            return "null"
        if isinstance(value, int) and not isinstance(value, bool):
            return self._resolve_resource(value)
        return str(value)

    def _resolve_resource(self, resource_id: int) -> str:
        context = self.config.context
        if context is None:
            raise ToastNotInitializedError("resolve resource", "process context")
        result = context.resolve_text(resource_id)
        if isinstance(result, Found):
            return result.text
        return str(resource_id)

    def _dispatch(self, request: DisplayRequest) -> None:
        text = request.text
        if not text:
            return

        if request.strategy is None:
            request = request.resolved_with(strategy=self._require_strategy("show"))
        if request.interceptor is None:
            request = request.resolved_with(interceptor=self._default_interceptor())
        if request.style is None:
            request = request.resolved_with(style=self._require_style("show"))

        if request.interceptor.intercept(request):
            logger.debug(
                "Toast %r suppressed by %s", text, type(request.interceptor).__name__
            )
            return

        request = request.resolved_with(duration=ToastDuration.for_text(text))
        request.strategy.show_toast(request)

    def _default_interceptor(self) -> IToastInterceptor:
        if self.config.interceptor is None:
            self.config.interceptor = ToastLogInterceptor()
        return self.config.interceptor

    def _require_strategy(self, operation: str) -> IToastStrategy:
        if self.config.strategy is None:
            raise ToastNotInitializedError(operation, "strategy")
        return self.config.strategy

    def _require_style(self, operation: str) -> IToastStyle:
        if self.config.style is None:
            raise ToastNotInitializedError(operation, "style")
        return self.config.style

    # ── Configuration ────────────────────────────────────────────────

    def set_gravity(
        self,
        gravity: int,
        x_offset: int = 0,
        y_offset: int = 0,
        horizontal_margin: float = 0.0,
        vertical_margin: float = 0.0,
    ) -> None:
        """Reposition the current style, keeping its appearance."""
        style = self._require_style("set gravity")
        self.config.style = LocationToastStyle.wrap(
            style, gravity, x_offset, y_offset, horizontal_margin, vertical_margin
        )
        logger.debug("Toast gravity set to %s (%s, %s)", gravity, x_offset, y_offset)

    def set_view(self, layout_id: int) -> None:
        """Switch to a custom layout, keeping the current placement."""
        if layout_id <= 0:
            return
        style = self._require_style("set view")
        self.set_style(CustomViewToastStyle.keeping_placement(style, layout_id))

    def set_style(self, style: IToastStyle) -> None:
        self.config.style = style
        logger.debug("Toast style set to %s", type(style).__name__)

    def get_style(self) -> IToastStyle | None:
        return self.config.style

    def set_strategy(self, strategy: IToastStrategy) -> None:
        """Install ``strategy`` and register it against the process context."""
        context = self.config.context
        if context is None:
            raise ToastNotInitializedError("set strategy", "process context")
        self.config.strategy = strategy
        strategy.register_strategy(context)
        logger.debug("Toast strategy set to %s", type(strategy).__name__)

    def get_strategy(self) -> IToastStrategy | None:
        return self.config.strategy

    def set_interceptor(self, interceptor: IToastInterceptor | None) -> None:
        self.config.interceptor = interceptor

    def get_interceptor(self) -> IToastInterceptor | None:
        return self.config.interceptor

    def set_debug_mode(self, debug: bool) -> None:
        self.config.debug_mode = debug

    def is_debug_mode(self) -> bool:
        """Return the debug flag, reading it from the context once if unset."""
        if self.config.debug_mode is None:
            context = self.config.context
            if context is None:
                raise ToastNotInitializedError("read debug mode", "process context")
            self.config.debug_mode = context.is_debuggable()
        return self.config.debug_mode


# Default instance for convenience
default_toaster = Toaster()
