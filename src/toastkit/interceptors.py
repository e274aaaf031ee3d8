"""Built-in interceptors: call-site logging and sensitive-content filtering."""

from __future__ import annotations

import logging
import os
import traceback
from typing import TYPE_CHECKING

from .ports.interceptor import IToastInterceptor

if TYPE_CHECKING:
    from .request import DisplayRequest

logger = logging.getLogger("toastkit.interceptor")

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

_DEFAULT_SENSITIVE_WORDS: frozenset[str] = frozenset(
    {
        "password",
        "passphrase",
        "secret",
        "token",
        "api_key",
        "private_key",
        "ssn",
        "card_number",
        "cvv",
    }
)


def _caller_location() -> str | None:
    """Return ``file:line`` of the innermost frame outside the toastkit package."""
    for frame in reversed(traceback.extract_stack()):
        filename = os.path.abspath(frame.filename)
        if not filename.startswith(_PACKAGE_DIR + os.sep):
            return f"{frame.filename}:{frame.lineno}"
    return None


class ToastLogInterceptor(IToastInterceptor):
    """
    Default interceptor: never suppresses, logs each toast with its call site.
    """

    def intercept(self, request: DisplayRequest) -> bool:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Toast %r from %s", request.text, _caller_location() or "<unknown>")
        return False


class SensitiveContentInterceptor(IToastInterceptor):
    """
    Suppresses toasts whose text mentions credentials or other secrets.

    Matching is a case-insensitive substring search over ``words``.
    """

    def __init__(self, words: set[str] | None = None) -> None:
        sensitive = set(words or _DEFAULT_SENSITIVE_WORDS)
        self._words = {w.lower() for w in sensitive}

    def intercept(self, request: DisplayRequest) -> bool:
        text = (request.text or "").lower()
        matched = sorted(w for w in self._words if w in text)
        if matched:
            logger.warning(
                "Suppressed toast containing sensitive content (%s)", ", ".join(matched)
            )
            return True
        return False
