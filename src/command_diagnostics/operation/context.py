"""
Operation contexts and their current-operation records.

A :class:`Client` represents one connection and owns the lock that guards the
current-operation record of every operation it runs. Other subsystems of the
connection mutate the record under that lock; diagnostics read it by taking a
:class:`CurrentOperationSnapshot` under the same lock.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from threading import RLock
from types import MappingProxyType
from typing import Any

from command_diagnostics.commands.base import CommandDescriptor
from command_diagnostics.operation.namespace import Namespace


class Client:
    """A connection, owner of the lock protecting its operations."""

    def __init__(self, name: str = "conn") -> None:
        self.name = name
        self.lock = RLock()

    def __repr__(self) -> str:
        return f"Client({self.name!r})"


@dataclass(frozen=True)
class CurrentOperationSnapshot:
    """Point-in-time copy of an operation's request details."""

    namespace: Namespace | None
    command: CommandDescriptor | None
    document: Mapping[str, Any] = field(default_factory=dict)
    omit_diagnostics: bool = False

    @property
    def command_name(self) -> str | None:
        return self.command.name if self.command is not None else None


class CurrentOperation:
    """Mutable request details of the operation running on a context.

    Every accessor takes the owning client's lock.
    """

    def __init__(self, client: Client) -> None:
        self._client = client
        self._namespace: Namespace | None = None
        self._command: CommandDescriptor | None = None
        self._document: Mapping[str, Any] = {}
        self._omit_diagnostics = False

    def set_request_details(
        self,
        namespace: Namespace | str,
        command: CommandDescriptor | None,
        document: Mapping[str, Any],
    ) -> None:
        """Attach the command being executed.

        Args:
            namespace: Target namespace, as a Namespace or ``"db.coll"``
            command: Descriptor of the command type, or None if unrecognized
            document: The raw command document, deep-copied so later
                changes by the caller never reach diagnostics
        """
        if isinstance(namespace, str):
            namespace = Namespace.parse(namespace)
        frozen = copy.deepcopy(dict(document))
        with self._client.lock:
            self._namespace = namespace
            self._command = command
            self._document = frozen

    def set_omit_diagnostics(self, omit: bool) -> None:
        """Suppress (or re-allow) diagnostic printing for this operation."""
        with self._client.lock:
            self._omit_diagnostics = bool(omit)

    def clear(self) -> None:
        """Detach the current command and reset the suppression flag."""
        with self._client.lock:
            self._namespace = None
            self._command = None
            self._document = {}
            self._omit_diagnostics = False

    def snapshot(self) -> CurrentOperationSnapshot:
        """Copy the request details under the client lock.

        The stored document is private to this record and never mutated, so a
        shallow copy is enough for formatting outside the lock.
        """
        with self._client.lock:
            return CurrentOperationSnapshot(
                namespace=self._namespace,
                command=self._command,
                document=MappingProxyType(dict(self._document)),
                omit_diagnostics=self._omit_diagnostics,
            )


class OperationContext:
    """Execution-scoped state backing one in-flight command."""

    def __init__(self, client: Client | None = None) -> None:
        self.client = client if client is not None else Client()
        self.cur_op = CurrentOperation(self.client)

    def __repr__(self) -> str:
        return f"OperationContext(client={self.client!r})"


def get_current_operation(op_ctx: OperationContext) -> CurrentOperationSnapshot | None:
    """Return a snapshot of the operation's request details.

    Returns None when the context has no current-operation record.
    """
    cur_op = getattr(op_ctx, "cur_op", None)
    if cur_op is None:
        return None
    return cur_op.snapshot()
