"""Base style types: gravity, placement, appearance."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag


class Gravity(IntFlag):
    """Screen anchoring flags (values compatible with Android ``Gravity``)."""

    NO_GRAVITY = 0
    CENTER_HORIZONTAL = 0x01
    LEFT = 0x03
    RIGHT = 0x05
    CENTER_VERTICAL = 0x10
    TOP = 0x30
    BOTTOM = 0x50
    CENTER = 0x11


@dataclass(frozen=True)
class Placement:
    """Where a toast sits on screen."""

    gravity: int = Gravity.CENTER
    x_offset: int = 0
    y_offset: int = 0
    horizontal_margin: float = 0.0
    vertical_margin: float = 0.0


@dataclass(frozen=True)
class Appearance:
    """Visual fields; only renderers interpret them."""

    background_color: str | None = None
    text_color: str | None = None
    text_size: float | None = None
    corner_radius: float | None = None
    padding: tuple[int, int, int, int] | None = None
    font: str | None = None


class PositionalAccessors:
    """Expose ``placement`` fields as flat read accessors."""

    placement: Placement

    @property
    def gravity(self) -> int:
        return self.placement.gravity

    @property
    def x_offset(self) -> int:
        return self.placement.x_offset

    @property
    def y_offset(self) -> int:
        return self.placement.y_offset

    @property
    def horizontal_margin(self) -> float:
        return self.placement.horizontal_margin

    @property
    def vertical_margin(self) -> float:
        return self.placement.vertical_margin


@dataclass(frozen=True)
class ToastStyle(PositionalAccessors):
    """A base (non-decorating) style."""

    appearance: Appearance = field(default_factory=Appearance)
    placement: Placement = field(default_factory=Placement)
    layout_id: int | None = None


def _dark_appearance() -> Appearance:
    return Appearance(background_color="#EC000000", text_color="#EEFFFFFF")


@dataclass(frozen=True)
class DarkToastStyle(ToastStyle):
    """The built-in default style: light text on a translucent dark box."""

    appearance: Appearance = field(default_factory=_dark_appearance)
