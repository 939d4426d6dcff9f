"""Global registry of command descriptors."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from importlib import metadata
from pathlib import Path
from threading import RLock
from typing import Any

import yaml
from pydantic import ValidationError

from .base import BUILTIN_COMMANDS, CommandDescriptor, CommandSpec

_ENTRY_POINT_GROUP = "command_diagnostics.commands"
_log = logging.getLogger(__name__)


class CommandRegistry:
    """Singleton registry mapping command names to descriptors.

    Seeded with the built-in commands, then with any descriptors published
    under the ``command_diagnostics.commands`` entry point group.

    Example commands.yaml:
    ```yaml
    commands:
      createUser:
        sensitive_fields: [pwd, customData]
        diagnostic_printing: false
      createIndexes:
        diagnostic_printing: true
    ```
    """

    _instance: CommandRegistry | None = None
    _instance_lock: RLock = RLock()

    def __new__(cls) -> CommandRegistry:
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
        return cls._instance

    _initialized: bool = False

    def __init__(self) -> None:
        if self._initialized:
            return
        self._commands: dict[str, CommandDescriptor] = {}
        self._lock: RLock = RLock()
        self._initialized = True
        for spec in BUILTIN_COMMANDS:
            self.register_command(spec)
        self._discover_entry_points()

    def register_command(self, descriptor: CommandDescriptor, *, replace: bool = False) -> None:
        """Register a command descriptor under its name.

        Command names are case-sensitive. Registering a different descriptor
        under a name that is already taken fails unless ``replace`` is set.
        """

        if not isinstance(descriptor, CommandDescriptor):
            raise TypeError("descriptor must implement CommandDescriptor.")
        name = descriptor.name
        if not isinstance(name, str) or not name.strip():
            raise ValueError("Command name must be a non-empty string.")
        with self._lock:
            existing = self._commands.get(name)
            if existing is not None and existing != descriptor and not replace:
                raise ValueError(f"Command '{name}' is already registered.")
            self._commands[name] = descriptor
        _log.debug("Registered command: %s", name)

    def find_command(self, name: str) -> CommandDescriptor | None:
        """Return the descriptor registered under ``name``, if any."""

        with self._lock:
            return self._commands.get(name)

    def list_commands(self) -> list[str]:
        """Return a sorted list of registered command names."""

        with self._lock:
            return sorted(self._commands.keys())

    def load_from_yaml(self, config_path: Path) -> None:
        """Load declarative command descriptors from a YAML file.

        Entries replace registered descriptors of the same name. Nothing is
        registered if the file cannot be read or any entry is invalid.
        """

        if not config_path.exists():
            _log.warning("Command table not found: %s", config_path)
            return

        try:
            data = yaml.safe_load(config_path.read_text()) or {}
            specs = parse_command_table(data.get("commands") or {})
        except (yaml.YAMLError, OSError, ValidationError, AttributeError, TypeError) as e:
            _log.error("Failed to load command table from %s: %s", config_path, e)
            return

        for spec in specs:
            self.register_command(spec, replace=True)
        _log.info("Loaded %d commands from %s", len(specs), config_path)

    def _discover_entry_points(self) -> None:
        """Load and register command descriptors from entry points."""

        try:
            entry_points = metadata.entry_points()
        except Exception:  # pragma: no cover - defensive for older importlib-metadata
            _log.debug("Failed to read command entry points.", exc_info=True)
            return

        for entry_point in self._select_entry_points(entry_points, _ENTRY_POINT_GROUP):
            try:
                loaded = entry_point.load()
                descriptor = loaded() if isinstance(loaded, type) else loaded
            except Exception:
                _log.debug(
                    "Failed to load command entry point '%s'.", entry_point.name, exc_info=True
                )
                continue

            if not isinstance(descriptor, CommandDescriptor):
                _log.debug(
                    "Command entry point '%s' resolved to %r, not a CommandDescriptor; skipping.",
                    entry_point.name,
                    descriptor,
                )
                continue

            try:
                self.register_command(descriptor)
            except Exception:
                _log.debug(
                    "Failed to register command entry point '%s'.", entry_point.name, exc_info=True
                )
                continue

    @staticmethod
    def _select_entry_points(entry_points: Any, group: str) -> Iterable[Any]:
        """Select entry points for *group* from importlib.metadata."""

        select = getattr(entry_points, "select", None)
        if callable(select):
            result: Iterable[Any] = select(group=group)
            return result

        return []


def parse_command_table(table: dict[str, Any]) -> list[CommandSpec]:
    """Parse a ``name -> settings`` mapping into command specs."""

    specs = []
    for name, settings in table.items():
        settings = settings or {}
        specs.append(
            CommandSpec(
                name=settings.get("name", name),
                sensitive_fields=frozenset(settings.get("sensitive_fields") or ()),
                diagnostic_printing=settings.get("diagnostic_printing", False),
            )
        )
    return specs


def get_registry() -> CommandRegistry:
    """Return the global command registry singleton."""

    return CommandRegistry()


def reset_registry() -> None:
    """Drop the global registry so the next lookup rebuilds it (for testing)."""

    with CommandRegistry._instance_lock:
        CommandRegistry._instance = None


def find_command(name: str) -> CommandDescriptor | None:
    """Look up a command descriptor in the global registry."""

    return get_registry().find_command(name)
