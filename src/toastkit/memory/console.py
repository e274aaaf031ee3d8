"""Console strategy for development debugging."""

from __future__ import annotations

import logging
import threading

from toastkit.ports.context import IProcessContext
from toastkit.ports.strategy import IToastStrategy
from toastkit.request import DisplayRequest

logger = logging.getLogger(__name__)


class ConsoleStrategy(IToastStrategy):
    """
    Development adapter that prints toasts to the console.

    Delayed requests are printed from a timer thread; a newer request or
    ``cancel_toast`` drops a pending one.
    """

    def __init__(self, output_to_stdout: bool = True):
        self.output_to_stdout = output_to_stdout
        self._timer: threading.Timer | None = None

    def register_strategy(self, context: IProcessContext) -> None:
        logger.debug("Console strategy registered against %r", context)

    def show_toast(self, request: DisplayRequest) -> None:
        request.ensure_resolved()
        self.cancel_toast()
        if request.delay_millis > 0:
            self._timer = threading.Timer(request.delay_millis / 1000, self._print, (request,))
            self._timer.daemon = True
            self._timer.start()
        else:
            self._print(request)

    def cancel_toast(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _print(self, request: DisplayRequest) -> None:
        style = request.style
        output = [
            "═" * 50,
            f"TOAST ({request.duration.name})",
            f"Text:     {request.text}",
            f"Gravity:  {style.gravity} ({style.x_offset}, {style.y_offset})",
        ]

        if style.layout_id is not None:
            output.append(f"Layout:   {style.layout_id}")

        if request.delay_millis:
            output.append(f"Delay:    {request.delay_millis}ms")

        output.append("═" * 50)

        full_output = "\n".join(output)
        logger.info(full_output)

        if self.output_to_stdout:
            print(full_output)
