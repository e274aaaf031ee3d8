"""Style that renders a custom layout."""

from __future__ import annotations

from dataclasses import dataclass

from ..ports.style import IToastStyle
from .base import Placement, ToastStyle


@dataclass(frozen=True)
class CustomViewToastStyle(ToastStyle):
    """A style whose appearance is defined entirely by ``layout_id``."""

    @classmethod
    def keeping_placement(cls, style: IToastStyle, layout_id: int) -> CustomViewToastStyle:
        """Build a custom-layout style that keeps the placement of ``style``."""
        return cls(
            layout_id=layout_id,
            placement=Placement(
                gravity=style.gravity,
                x_offset=style.x_offset,
                y_offset=style.y_offset,
                horizontal_margin=style.horizontal_margin,
                vertical_margin=style.vertical_margin,
            ),
        )
