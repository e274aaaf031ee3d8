"""Memory adapters for testing and development."""

from __future__ import annotations

from toastkit.memory.console import ConsoleStrategy
from toastkit.memory.fake import InMemoryStrategy, RecordingInterceptor

__all__ = ["ConsoleStrategy", "InMemoryStrategy", "RecordingInterceptor"]
