"""
Lazy printer for the command running on an operation.

A :class:`Printer` is meant to be created inline wherever a fatal error or
crash is logged::

    logger.error("Unhandled failure: %s", Printer(op_ctx))

Construction only stores the context. All work happens when the printer is
converted to text, which ``logging`` does only if the record is emitted.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from command_diagnostics.commands.base import CommandDescriptor
from command_diagnostics.decision import (
    OMIT_UNRECOGNIZED_COMMAND_MSG,
    OMIT_UNSUPPORTED_COMMAND_MSG,
    OMIT_UNSUPPORTED_OPERATION_MSG,
    OP_CTX_IS_NULL_MSG,
    decide,
)
from command_diagnostics.operation.context import (
    CurrentOperationSnapshot,
    OperationContext,
    get_current_operation,
)
from command_diagnostics.redaction.fields import FieldRedactor
from command_diagnostics.redaction.mode import should_redact_logs

logger = logging.getLogger(__name__)


class Printer:
    """Renders the current command of an operation for diagnostic logs.

    Rendering never raises. Each render reads a fresh snapshot, so the output
    reflects the operation's state at render time, not at construction.
    """

    OP_CTX_IS_NULL_MSG: ClassVar[str] = OP_CTX_IS_NULL_MSG
    OMIT_UNRECOGNIZED_COMMAND_MSG: ClassVar[str] = OMIT_UNRECOGNIZED_COMMAND_MSG
    OMIT_UNSUPPORTED_OPERATION_MSG: ClassVar[str] = OMIT_UNSUPPORTED_OPERATION_MSG
    OMIT_UNSUPPORTED_COMMAND_MSG: ClassVar[str] = OMIT_UNSUPPORTED_COMMAND_MSG

    __slots__ = ("_op_ctx",)

    def __init__(self, op_ctx: OperationContext | None) -> None:
        self._op_ctx = op_ctx

    def render(self) -> str:
        """Render the command, or the fixed message explaining its omission."""
        try:
            return self._render()
        except Exception:
            logger.debug("Failed to render command diagnostics.", exc_info=True)
            return OMIT_UNRECOGNIZED_COMMAND_MSG

    def _render(self) -> str:
        # The client lock is held only while the snapshot is copied.
        snapshot = get_current_operation(self._op_ctx) if self._op_ctx is not None else None
        decision = decide(snapshot, has_context=self._op_ctx is not None)
        if not decision.proceed or snapshot is None or snapshot.command is None:
            return decision.message or OMIT_UNRECOGNIZED_COMMAND_MSG
        return self._format(snapshot, snapshot.command)

    @staticmethod
    def _format(snapshot: CurrentOperationSnapshot, command: CommandDescriptor) -> str:
        head = f"{{ns: {snapshot.namespace}, command: {command.name}"
        if not snapshot.document:
            return head + "}"

        redactor = FieldRedactor(command.sensitive_field_names(), should_redact_logs())
        return f"{head}, fields: {redactor.render(snapshot.document)}}}"

    def __str__(self) -> str:
        return self.render()

    def __format__(self, format_spec: str) -> str:
        text = self.render()
        try:
            return format(text, format_spec)
        except (TypeError, ValueError):
            logger.debug("Ignoring format spec %r for command diagnostics.", format_spec)
            return text

    def __repr__(self) -> str:
        return f"Printer({self._op_ctx!r})"
