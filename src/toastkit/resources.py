"""Resource lookup results and the bundled mapping-backed process context."""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found:
    """A resource identifier that resolved to text."""

    text: str


@dataclass(frozen=True)
class NotFound:
    """A resource identifier with no matching text resource."""

    resource_id: int


ResourceResult = Found | NotFound


class MappingProcessContext:
    """
    Process context backed by an in-memory resource table.

    ``debuggable`` is a plain attribute so hosts (and tests) can flip it;
    when not given it follows Python's development mode (``-X dev``).
    """

    def __init__(
        self,
        resources: Mapping[int, str] | None = None,
        *,
        debuggable: bool | None = None,
    ) -> None:
        self._resources = dict(resources or {})
        self.debuggable = sys.flags.dev_mode if debuggable is None else debuggable

    def resolve_text(self, resource_id: int) -> ResourceResult:
        text = self._resources.get(resource_id)
        if text is None:
            logger.debug("No text resource for id %s", resource_id)
            return NotFound(resource_id)
        return Found(text)

    def is_debuggable(self) -> bool:
        return bool(self.debuggable)

    def add_resource(self, resource_id: int, text: str) -> None:
        self._resources[resource_id] = text
