"""Toast dispatch: request resolution, interception, styles and display strategies."""

from __future__ import annotations

from .config import ToastConfig
from .exceptions import InvalidRequestError, ToastError, ToastNotInitializedError
from .interceptors import SensitiveContentInterceptor, ToastLogInterceptor

# Memory adapters for testing
from .memory.console import ConsoleStrategy
from .memory.fake import InMemoryStrategy, RecordingInterceptor
from .ports.context import IProcessContext
from .ports.interceptor import IToastInterceptor
from .ports.strategy import IToastStrategy
from .ports.style import IToastStyle
from .request import DisplayRequest, ToastDuration
from .resources import Found, MappingProcessContext, NotFound, ResourceResult
from .strategy import LoggingRenderer, ToastRenderer, ToastStrategy
from .style import (
    Appearance,
    CustomViewToastStyle,
    DarkToastStyle,
    Gravity,
    LocationToastStyle,
    Placement,
    ToastStyle,
    innermost_style,
)
from .toaster import Toaster, default_toaster

__all__ = [
    "Appearance",
    "ConsoleStrategy",
    "CustomViewToastStyle",
    "DarkToastStyle",
    "DisplayRequest",
    "Found",
    "Gravity",
    "IProcessContext",
    "IToastInterceptor",
    "IToastStrategy",
    "IToastStyle",
    "InMemoryStrategy",
    "InvalidRequestError",
    "LocationToastStyle",
    "LoggingRenderer",
    "MappingProcessContext",
    "NotFound",
    "Placement",
    "RecordingInterceptor",
    "ResourceResult",
    "SensitiveContentInterceptor",
    "ToastConfig",
    "ToastDuration",
    "ToastError",
    "ToastLogInterceptor",
    "ToastNotInitializedError",
    "ToastRenderer",
    "ToastStrategy",
    "ToastStyle",
    "Toaster",
    "default_toaster",
    "innermost_style",
]
