"""
Eligibility cascade for command diagnostics.

Decides whether anything about the current command may be disclosed. Checks
run in a fixed order and the first match wins:

1. No operation context.
2. No command attached to the operation.
3. The operation asked to omit diagnostic information.
4. The command type does not support diagnostic printing.

Absence checks come first so command metadata is never touched for a missing
command, and per-operation suppression overrides the command's own policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from command_diagnostics.operation.context import CurrentOperationSnapshot

OP_CTX_IS_NULL_MSG = "operation context is null"
OMIT_UNRECOGNIZED_COMMAND_MSG = "omitted: unrecognized command"
OMIT_UNSUPPORTED_OPERATION_MSG = "omitted: this operation does not support diagnostic printing"
OMIT_UNSUPPORTED_COMMAND_MSG = "omitted: command does not support diagnostic printing"


class DiagnosticOutcome(str, Enum):
    """Result of the eligibility cascade."""

    OP_CTX_IS_NULL = "op_ctx_is_null"
    UNRECOGNIZED_COMMAND = "unrecognized_command"
    UNSUPPORTED_OPERATION = "unsupported_operation"
    UNSUPPORTED_COMMAND = "unsupported_command"
    PROCEED = "proceed"


_MESSAGES: dict[DiagnosticOutcome, str] = {
    DiagnosticOutcome.OP_CTX_IS_NULL: OP_CTX_IS_NULL_MSG,
    DiagnosticOutcome.UNRECOGNIZED_COMMAND: OMIT_UNRECOGNIZED_COMMAND_MSG,
    DiagnosticOutcome.UNSUPPORTED_OPERATION: OMIT_UNSUPPORTED_OPERATION_MSG,
    DiagnosticOutcome.UNSUPPORTED_COMMAND: OMIT_UNSUPPORTED_COMMAND_MSG,
}


@dataclass(frozen=True)
class DiagnosticDecision:
    """Decision made by the eligibility cascade."""

    outcome: DiagnosticOutcome

    @property
    def proceed(self) -> bool:
        return self.outcome is DiagnosticOutcome.PROCEED

    @property
    def message(self) -> str | None:
        """Fixed message replacing the command, or None when rendering proceeds."""
        return _MESSAGES.get(self.outcome)


def decide(
    snapshot: CurrentOperationSnapshot | None,
    *,
    has_context: bool = True,
) -> DiagnosticDecision:
    """Run the eligibility cascade.

    Args:
        snapshot: Request details of the operation, if it has any
        has_context: False when the printer was bound to no operation context

    Returns:
        DiagnosticDecision with the first matching outcome
    """
    if not has_context:
        return DiagnosticDecision(DiagnosticOutcome.OP_CTX_IS_NULL)
    if snapshot is None or snapshot.command is None:
        return DiagnosticDecision(DiagnosticOutcome.UNRECOGNIZED_COMMAND)
    if snapshot.omit_diagnostics:
        return DiagnosticDecision(DiagnosticOutcome.UNSUPPORTED_OPERATION)
    if not snapshot.command.enable_diagnostic_printing_on_failure():
        return DiagnosticDecision(DiagnosticOutcome.UNSUPPORTED_COMMAND)
    return DiagnosticDecision(DiagnosticOutcome.PROCEED)
