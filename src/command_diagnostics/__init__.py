"""command-diagnostics package."""

from .commands import CommandDescriptor, CommandRegistry, CommandSpec, find_command, get_registry
from .config import DiagnosticsConfig, apply_config, load_config
from .decision import DiagnosticDecision, DiagnosticOutcome, decide
from .logging import log_command_diagnostics
from .operation import (
    Client,
    CurrentOperation,
    CurrentOperationSnapshot,
    Namespace,
    OperationContext,
    get_current_operation,
)
from .printer import Printer
from .redaction import (
    REDACTION_MARKER,
    FieldRedactor,
    RedactionMode,
    set_should_redact_logs,
    should_redact_logs,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Client",
    "CommandDescriptor",
    "CommandRegistry",
    "CommandSpec",
    "CurrentOperation",
    "CurrentOperationSnapshot",
    "DiagnosticDecision",
    "DiagnosticOutcome",
    "DiagnosticsConfig",
    "FieldRedactor",
    "Namespace",
    "OperationContext",
    "Printer",
    "REDACTION_MARKER",
    "RedactionMode",
    "apply_config",
    "decide",
    "find_command",
    "get_current_operation",
    "get_registry",
    "load_config",
    "log_command_diagnostics",
    "set_should_redact_logs",
    "should_redact_logs",
]
