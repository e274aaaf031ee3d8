"""Process context port."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..resources import ResourceResult


@runtime_checkable
class IProcessContext(Protocol):
    """
    Host process handle needed to register strategies and resolve resources.

    Implementations: MappingProcessContext.
    """

    def resolve_text(self, resource_id: int) -> ResourceResult:
        """Look up a text resource, returning ``Found`` or ``NotFound``."""
        ...

    def is_debuggable(self) -> bool:
        """Whether the host process runs in debuggable mode."""
        ...
