"""Operation contexts, current-operation records and namespaces."""

from command_diagnostics.operation.context import (
    Client,
    CurrentOperation,
    CurrentOperationSnapshot,
    OperationContext,
    get_current_operation,
)
from command_diagnostics.operation.namespace import Namespace

__all__ = [
    "Client",
    "CurrentOperation",
    "CurrentOperationSnapshot",
    "Namespace",
    "OperationContext",
    "get_current_operation",
]
