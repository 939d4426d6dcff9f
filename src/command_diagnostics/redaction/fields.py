"""
Name-based field redaction for command documents.

Each top-level field renders as ``name: value``. A field's value is replaced
by ``REDACTION_MARKER`` when its name is declared sensitive by the command, or
when global redaction is enabled. Names are always kept visible.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from command_diagnostics.documents import format_fields, format_value

logger = logging.getLogger(__name__)

REDACTION_MARKER = "###"


class FieldRedactor:
    """Render command documents with sensitive values replaced."""

    def __init__(self, sensitive_fields: Iterable[str] = (), redact_all: bool = False) -> None:
        """Initialize the redactor.

        Args:
            sensitive_fields: Field names whose values are always hidden
            redact_all: Hide every field value (global redaction mode)
        """
        self._sensitive = frozenset(sensitive_fields)
        self._redact_all = redact_all

    @property
    def sensitive_fields(self) -> frozenset[str]:
        return self._sensitive

    @property
    def redact_all(self) -> bool:
        return self._redact_all

    def should_redact(self, name: str) -> bool:
        """Check whether the value of field ``name`` must be hidden."""
        return name in self._sensitive or self._redact_all

    def render(self, document: Mapping[str, Any]) -> str:
        """Render ``document`` as ``{ name: value, ... }`` with redaction applied."""
        return format_fields(self._render_fields(document))

    def _render_fields(self, document: Mapping[str, Any]) -> Iterator[tuple[str, str]]:
        for name, value in document.items():
            if not isinstance(name, str):
                yield repr(name), REDACTION_MARKER
                continue
            if self.should_redact(name):
                yield name, REDACTION_MARKER
                continue
            yield name, self._render_value(name, value)

    @staticmethod
    def _render_value(name: str, value: Any) -> str:
        # A value that cannot be rendered is treated as opaque.
        try:
            return format_value(value)
        except Exception:
            logger.debug("Failed to render field '%s'; redacting it.", name, exc_info=True)
            return REDACTION_MARKER


def redact_fields(
    document: Mapping[str, Any],
    sensitive_fields: Iterable[str] = (),
    redact_all: bool = False,
) -> str:
    """Render ``document`` with the given redaction rules.

    Convenience wrapper around :class:`FieldRedactor`.
    """
    return FieldRedactor(sensitive_fields, redact_all).render(document)
