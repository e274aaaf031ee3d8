"""Port definitions for toast display."""

from __future__ import annotations

from toastkit.ports.context import IProcessContext
from toastkit.ports.interceptor import IToastInterceptor
from toastkit.ports.strategy import IToastStrategy
from toastkit.ports.style import IToastStyle

__all__ = [
    "IProcessContext",
    "IToastInterceptor",
    "IToastStrategy",
    "IToastStyle",
]
