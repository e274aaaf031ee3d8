"""Toast styles and the positioning decorator."""

from __future__ import annotations

from toastkit.style.base import Appearance, DarkToastStyle, Gravity, Placement, ToastStyle
from toastkit.style.layout import CustomViewToastStyle
from toastkit.style.location import LocationToastStyle, innermost_style

__all__ = [
    "Appearance",
    "CustomViewToastStyle",
    "DarkToastStyle",
    "Gravity",
    "LocationToastStyle",
    "Placement",
    "ToastStyle",
    "innermost_style",
]
