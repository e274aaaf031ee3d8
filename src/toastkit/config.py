"""Process-wide toast configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .ports.context import IProcessContext
    from .ports.interceptor import IToastInterceptor
    from .ports.strategy import IToastStrategy
    from .ports.style import IToastStyle


@dataclass
class ToastConfig:
    """
    Shared, mutable configuration read by every dispatch.

    Expected to be set up once at startup and changed rarely after that.
    There is no locking: mutating it from one thread while another thread
    is dispatching toasts is not supported.
    """

    context: IProcessContext | None = None
    strategy: IToastStrategy | None = None
    style: IToastStyle | None = None
    interceptor: IToastInterceptor | None = None
    debug_mode: bool | None = None
