#!/usr/bin/env python3
"""
Crash Report Example

This example demonstrates how command diagnostics are embedded in fatal-error
logs:
- Attaching a command to an operation context
- Logging it with sensitive fields redacted
- Suppressing diagnostics for a single operation
- Enabling global log redaction

Usage:
    python examples/crash_report.py
"""

import logging

from command_diagnostics import (
    CommandSpec,
    OperationContext,
    Printer,
    find_command,
    get_registry,
    log_command_diagnostics,
    set_should_redact_logs,
)

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("crash_report")


def main():
    """Run crash report examples."""

    registry = get_registry()
    registry.register_command(
        CommandSpec(name="rotateKey", sensitive_fields=frozenset({"key"}), diagnostic_printing=True)
    )

    op_ctx = OperationContext()

    print("=" * 70)
    print("Command Diagnostics - Crash Report Example")
    print("=" * 70)

    # Example 1: no command attached yet
    print("\n[Example 1] Operation with no command")
    print("-" * 70)
    log_command_diagnostics(logger, op_ctx, "Writing fatal error")

    # Example 2: built-in command, printed in full
    print("\n[Example 2] createIndexes")
    print("-" * 70)
    op_ctx.cur_op.set_request_details(
        "myDB.myColl",
        find_command("createIndexes"),
        {"createIndexes": "myColl", "indexes": [{"key": {"a": 1}, "name": "a_1"}]},
    )
    log_command_diagnostics(logger, op_ctx, "Writing fatal error")

    # Example 3: sensitive field redacted
    print("\n[Example 3] Command with a sensitive field")
    print("-" * 70)
    op_ctx.cur_op.set_request_details(
        "admin", find_command("rotateKey"), {"rotateKey": 1, "key": "s3cr3t", "version": 2}
    )
    log_command_diagnostics(logger, op_ctx, "Writing fatal error")

    # Example 4: global redaction
    print("\n[Example 4] Global log redaction")
    print("-" * 70)
    set_should_redact_logs(True)
    log_command_diagnostics(logger, op_ctx, "Writing fatal error")
    set_should_redact_logs(False)

    # Example 5: per-operation suppression
    print("\n[Example 5] Suppressed operation")
    print("-" * 70)
    op_ctx.cur_op.set_omit_diagnostics(True)
    print(f"Command: {Printer(op_ctx)}")

    # Example 6: no operation context at all
    print("\n[Example 6] No operation context")
    print("-" * 70)
    print(f"Command: {Printer(None)}")


if __name__ == "__main__":
    main()
