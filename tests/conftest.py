"""Pytest configuration and shared fixtures for command-diagnostics tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from command_diagnostics.commands.registry import reset_registry
from command_diagnostics.operation import Namespace, OperationContext
from command_diagnostics.redaction.mode import RedactionMode

CMD_NAME = "mockCmd"
CMD_VALUE = "abcdefgh"
SENSITIVE_FIELD_NAME = "sensitive"
SENSITIVE_VALUE = "12345678"


class MockCmd:
    """Mock command that declares one sensitive field."""

    name = CMD_NAME

    def __init__(self, diagnostic_printing: bool = True) -> None:
        self._diagnostic_printing = diagnostic_printing

    def sensitive_field_names(self) -> frozenset[str]:
        return frozenset({SENSITIVE_FIELD_NAME})

    def enable_diagnostic_printing_on_failure(self) -> bool:
        return self._diagnostic_printing


@pytest.fixture(autouse=True)
def reset_global_state() -> Iterator[None]:
    """Give every test a fresh redaction mode and command registry."""
    RedactionMode.reset()
    reset_registry()
    yield
    RedactionMode.reset()
    reset_registry()


@pytest.fixture
def nss() -> Namespace:
    return Namespace.parse("myDB.myColl")


@pytest.fixture
def mock_cmd() -> MockCmd:
    return MockCmd()


@pytest.fixture
def cmd_document() -> dict[str, Any]:
    return {CMD_NAME: CMD_VALUE, SENSITIVE_FIELD_NAME: SENSITIVE_VALUE}


@pytest.fixture
def op_ctx() -> OperationContext:
    return OperationContext()


@pytest.fixture
def op_ctx_with_mock_cmd(
    op_ctx: OperationContext,
    nss: Namespace,
    mock_cmd: MockCmd,
    cmd_document: dict[str, Any],
) -> OperationContext:
    """Operation context running the mock command."""
    op_ctx.cur_op.set_request_details(nss, mock_cmd, cmd_document)
    return op_ctx
