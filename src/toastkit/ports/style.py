"""Toast style port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..style.base import Appearance, Placement


@runtime_checkable
class IToastStyle(Protocol):
    """
    Visual appearance and screen placement of a toast.

    Positional accessors are what positioning decorators override;
    ``appearance`` and ``layout_id`` are opaque to the toaster.
    """

    @property
    def placement(self) -> Placement: ...

    @property
    def appearance(self) -> Appearance: ...

    @property
    def layout_id(self) -> int | None: ...

    @property
    def gravity(self) -> int: ...

    @property
    def x_offset(self) -> int: ...

    @property
    def y_offset(self) -> int: ...

    @property
    def horizontal_margin(self) -> float: ...

    @property
    def vertical_margin(self) -> float: ...
