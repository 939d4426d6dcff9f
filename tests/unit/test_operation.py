from __future__ import annotations

import pytest

from command_diagnostics.commands import CommandSpec
from command_diagnostics.operation import (
    Client,
    Namespace,
    OperationContext,
    get_current_operation,
)

_CMD = CommandSpec(name="find", diagnostic_printing=True)


def test_namespace_parse() -> None:
    nss = Namespace.parse("myDB.myColl")
    assert nss.db == "myDB"
    assert nss.coll == "myColl"
    assert str(nss) == "myDB.myColl"


def test_namespace_collection_may_contain_dots() -> None:
    nss = Namespace.parse("myDB.system.views")
    assert nss.coll == "system.views"


def test_namespace_db_only() -> None:
    nss = Namespace.parse("admin")
    assert nss.is_db_only
    assert str(nss) == "admin"


def test_namespace_requires_db() -> None:
    with pytest.raises(ValueError):
        Namespace.parse(".coll")


def test_fresh_operation_has_no_command() -> None:
    snapshot = get_current_operation(OperationContext())
    assert snapshot is not None
    assert snapshot.command is None
    assert snapshot.namespace is None
    assert not snapshot.omit_diagnostics


def test_snapshot_is_a_copy() -> None:
    op_ctx = OperationContext(Client("conn1"))
    document = {"find": "myColl"}
    op_ctx.cur_op.set_request_details("myDB.myColl", _CMD, document)
    snapshot = get_current_operation(op_ctx)
    assert snapshot is not None

    document["filter"] = {"a": 1}
    op_ctx.cur_op.set_omit_diagnostics(True)

    assert dict(snapshot.document) == {"find": "myColl"}
    assert not snapshot.omit_diagnostics
    assert snapshot.namespace == Namespace("myDB", "myColl")
    assert snapshot.command_name == "find"


def test_snapshot_document_is_read_only() -> None:
    op_ctx = OperationContext()
    op_ctx.cur_op.set_request_details("myDB.myColl", _CMD, {"find": "myColl"})
    snapshot = get_current_operation(op_ctx)
    assert snapshot is not None
    with pytest.raises(TypeError):
        snapshot.document["find"] = "other"  # type: ignore[index]


def test_clear_detaches_command() -> None:
    op_ctx = OperationContext()
    op_ctx.cur_op.set_request_details("myDB.myColl", _CMD, {"find": "myColl"})
    op_ctx.cur_op.set_omit_diagnostics(True)
    op_ctx.cur_op.clear()
    snapshot = get_current_operation(op_ctx)
    assert snapshot is not None
    assert snapshot.command is None
    assert not snapshot.omit_diagnostics


def test_context_without_current_operation() -> None:
    class BareContext:
        pass

    assert get_current_operation(BareContext()) is None  # type: ignore[arg-type]
