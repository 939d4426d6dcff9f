"""Command descriptors and their registry."""

from command_diagnostics.commands.base import BUILTIN_COMMANDS, CommandDescriptor, CommandSpec
from command_diagnostics.commands.registry import (
    CommandRegistry,
    find_command,
    get_registry,
    parse_command_table,
    reset_registry,
)

__all__ = [
    "BUILTIN_COMMANDS",
    "CommandDescriptor",
    "CommandRegistry",
    "CommandSpec",
    "find_command",
    "get_registry",
    "parse_command_table",
    "reset_registry",
]
