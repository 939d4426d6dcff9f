"""Command descriptor definitions for command-diagnostics."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator


@runtime_checkable
class CommandDescriptor(Protocol):
    """Per-command-type metadata consulted when printing diagnostics.

    Implementations must be static: the sensitive field set and the
    diagnostic printing flag never change for a given command type.
    """

    name: str

    def sensitive_field_names(self) -> frozenset[str]:
        """Return the names of fields whose values must never be logged."""
        ...

    def enable_diagnostic_printing_on_failure(self) -> bool:
        """Return whether the command may be printed in crash diagnostics."""
        ...


class CommandSpec(BaseModel):
    """Declarative command descriptor."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Command name, the first field of the command document.")
    sensitive_fields: frozenset[str] = Field(
        default_factory=frozenset,
        description="Field names whose values are always redacted.",
    )
    diagnostic_printing: bool = Field(
        default=False,
        description="Allow the command to be printed in failure diagnostics.",
    )

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Command name must be a non-empty string.")
        return value

    def sensitive_field_names(self) -> frozenset[str]:
        return self.sensitive_fields

    def enable_diagnostic_printing_on_failure(self) -> bool:
        return self.diagnostic_printing


BUILTIN_COMMANDS: tuple[CommandSpec, ...] = (
    CommandSpec(name="createIndexes", diagnostic_printing=True),
    CommandSpec(name="find", diagnostic_printing=True),
    CommandSpec(name="aggregate", diagnostic_printing=True),
    CommandSpec(name="count", diagnostic_printing=True),
    CommandSpec(name="distinct", diagnostic_printing=True),
    CommandSpec(name="createUser", sensitive_fields=frozenset({"pwd"})),
    CommandSpec(name="updateUser", sensitive_fields=frozenset({"pwd"})),
    CommandSpec(name="ping"),
)
