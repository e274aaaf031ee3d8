"""Display request model and duration enum."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InvalidRequestError

if TYPE_CHECKING:
    from .ports.interceptor import IToastInterceptor
    from .ports.strategy import IToastStrategy
    from .ports.style import IToastStyle

LONG_TEXT_THRESHOLD = 20


class ToastDuration(Enum):
    """How long a toast stays visible."""

    UNSET = -1
    SHORT = 0
    LONG = 1

    @classmethod
    def for_text(cls, text: str) -> ToastDuration:
        """Infer the duration from text length."""
        return cls.LONG if len(text) > LONG_TEXT_THRESHOLD else cls.SHORT


class DisplayRequest(BaseModel):
    """
    Immutable description of one toast to show.

    Fields left as ``None`` (or ``ToastDuration.UNSET``) are filled in by
    ``Toaster`` from the process-wide configuration. Resolution never
    mutates a request; it returns a new one via :meth:`resolved_with`.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    text: str | None = None
    delay_millis: int = Field(default=0, ge=0)
    duration: ToastDuration = ToastDuration.UNSET
    strategy: Any = None
    style: Any = None
    interceptor: Any = None

    @property
    def is_resolved(self) -> bool:
        return (
            self.strategy is not None
            and self.style is not None
            and self.interceptor is not None
            and self.duration is not ToastDuration.UNSET
        )

    def resolved_with(
        self,
        *,
        strategy: IToastStrategy | None = None,
        style: IToastStyle | None = None,
        interceptor: IToastInterceptor | None = None,
        duration: ToastDuration | None = None,
    ) -> DisplayRequest:
        """Return a copy with the given fields filled in where still unset."""
        update: dict[str, Any] = {}
        if self.strategy is None and strategy is not None:
            update["strategy"] = strategy
        if self.style is None and style is not None:
            update["style"] = style
        if self.interceptor is None and interceptor is not None:
            update["interceptor"] = interceptor
        if self.duration is ToastDuration.UNSET and duration is not None:
            update["duration"] = duration
        if not update:
            return self
        return self.model_copy(update=update)

    def ensure_resolved(self) -> None:
        """Raise ``InvalidRequestError`` naming the first unresolved field."""
        for name in ("strategy", "style", "interceptor"):
            if getattr(self, name) is None:
                raise InvalidRequestError(name)
        if self.duration is ToastDuration.UNSET:
            raise InvalidRequestError("duration")
