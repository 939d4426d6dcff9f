"""
Secret-safe logging of command diagnostics.

Passes a :class:`~command_diagnostics.printer.Printer` to the logger as a
%-style argument, so the command is only rendered (and its operation only
locked) if the record is actually emitted.
"""

from __future__ import annotations

import logging

from command_diagnostics.operation.context import OperationContext
from command_diagnostics.printer import Printer

DEFAULT_MESSAGE = "Command diagnostics"


def log_command_diagnostics(
    logger: logging.Logger,
    op_ctx: OperationContext | None,
    message: str = DEFAULT_MESSAGE,
    level: int = logging.ERROR,
) -> None:
    """Log the command running on ``op_ctx`` as ``"<message>: <command>"``."""
    logger.log(level, "%s: %s", message, Printer(op_ctx))


__all__ = ["DEFAULT_MESSAGE", "log_command_diagnostics"]
