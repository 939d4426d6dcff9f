"""
Process-wide log redaction mode.

When enabled, every field value in diagnostic output is replaced by the
redaction marker; field names and command names stay visible.

Reads are lock-free: the flag is a single attribute holding a ``bool``, so a
reader always observes either the old or the new value, never a partial one.
A render that races with a toggle may use either value, which only affects
that one line of output. Writes are serialized so concurrent toggles apply in
a well-defined order.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import ClassVar

logger = logging.getLogger(__name__)


class RedactionMode:
    """Atomic boolean controlling global redaction of diagnostic output."""

    _instance: ClassVar[RedactionMode | None] = None
    _instance_lock: ClassVar[Lock] = Lock()

    def __init__(self, enabled: bool = False) -> None:
        self._enabled = bool(enabled)
        self._write_lock = Lock()

    @classmethod
    def get_instance(cls) -> RedactionMode:
        """Get or create the process-wide instance."""
        instance = cls._instance
        if instance is not None:
            return instance
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the process-wide instance (for testing)."""
        with cls._instance_lock:
            cls._instance = None

    def is_enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        with self._write_lock:
            previous = self._enabled
            self._enabled = bool(enabled)
        if previous != self._enabled:
            logger.info("Log redaction %s", "enabled" if self._enabled else "disabled")


def should_redact_logs() -> bool:
    """Return whether global log redaction is currently enabled."""
    return RedactionMode.get_instance().is_enabled()


def set_should_redact_logs(enabled: bool) -> None:
    """Enable or disable global log redaction for the whole process."""
    RedactionMode.get_instance().set_enabled(enabled)
