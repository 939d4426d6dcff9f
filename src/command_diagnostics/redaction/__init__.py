"""
Redaction for command diagnostics.

Per-field redaction driven by command metadata, and the process-wide
redaction mode.
"""

from command_diagnostics.redaction.fields import REDACTION_MARKER, FieldRedactor, redact_fields
from command_diagnostics.redaction.mode import (
    RedactionMode,
    set_should_redact_logs,
    should_redact_logs,
)

__all__ = [
    # Field redaction
    "REDACTION_MARKER",
    "FieldRedactor",
    "redact_fields",
    # Global mode
    "RedactionMode",
    "set_should_redact_logs",
    "should_redact_logs",
]
