"""Positioning decorator: overrides placement, delegates everything else."""

from __future__ import annotations

from dataclasses import dataclass

from ..ports.style import IToastStyle
from .base import Appearance, Placement, PositionalAccessors


@dataclass(frozen=True)
class LocationToastStyle(PositionalAccessors):
    """
    Wraps a style and replaces only its placement.

    Appearance and layout always come from ``base``, so wrapping a
    wrapped style still reads them from the innermost base style.
    """

    base: IToastStyle
    placement: Placement

    @property
    def appearance(self) -> Appearance:
        return self.base.appearance

    @property
    def layout_id(self) -> int | None:
        return self.base.layout_id

    @classmethod
    def wrap(
        cls,
        style: IToastStyle,
        gravity: int,
        x_offset: int = 0,
        y_offset: int = 0,
        horizontal_margin: float = 0.0,
        vertical_margin: float = 0.0,
    ) -> LocationToastStyle:
        """Place ``style`` at the given position, replacing an existing decorator."""
        if isinstance(style, LocationToastStyle):
            style = style.base
        return cls(
            base=style,
            placement=Placement(
                gravity=gravity,
                x_offset=x_offset,
                y_offset=y_offset,
                horizontal_margin=horizontal_margin,
                vertical_margin=vertical_margin,
            ),
        )


def innermost_style(style: IToastStyle) -> IToastStyle:
    """Follow positioning decorators down to the base style."""
    while isinstance(style, LocationToastStyle):
        style = style.base
    return style
