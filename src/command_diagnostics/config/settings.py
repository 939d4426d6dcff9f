"""
Configuration for command diagnostics.

Settings are read from a YAML file and then from the environment.

Example ~/.config/command-diagnostics/config.yaml:
```yaml
redact_logs: false
commands:
  createUser:
    sensitive_fields: [pwd, customData]
    diagnostic_printing: false
```

Environment Variables:
    COMMAND_DIAGNOSTICS_REDACT_LOGS: Enable global log redaction
        ("1", "true", "yes", "on"; anything else disables it)
    COMMAND_DIAGNOSTICS_CONFIG: Path of the YAML file to read
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field

from command_diagnostics.commands.base import CommandSpec
from command_diagnostics.commands.registry import CommandRegistry, get_registry
from command_diagnostics.redaction.mode import set_should_redact_logs

logger = logging.getLogger(__name__)

ENV_REDACT_LOGS = "COMMAND_DIAGNOSTICS_REDACT_LOGS"
ENV_CONFIG_FILE = "COMMAND_DIAGNOSTICS_CONFIG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class CommandOverride(BaseModel):
    """Declarative metadata for one command type."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    sensitive_fields: list[str] = Field(
        default_factory=list,
        description="Field names whose values are always redacted",
    )
    diagnostic_printing: bool = Field(
        default=False,
        description="Allow the command to be printed in failure diagnostics",
    )


class DiagnosticsConfig(BaseModel):
    """Configuration for command diagnostics."""

    model_config = ConfigDict(extra="forbid")

    redact_logs: bool = Field(
        default=False,
        description="Redact every field value in diagnostic output",
    )
    commands: dict[str, CommandOverride] = Field(
        default_factory=dict,
        description="Command metadata keyed by command name",
    )

    def command_specs(self) -> list[CommandSpec]:
        """Build command descriptors from the ``commands`` table."""
        return [
            CommandSpec(
                name=name,
                sensitive_fields=frozenset(override.sensitive_fields),
                diagnostic_printing=override.diagnostic_printing,
            )
            for name, override in self.commands.items()
        ]


def get_config_file() -> Path:
    """Get the config file path. Computed at runtime for test compatibility."""
    configured = os.environ.get(ENV_CONFIG_FILE)
    if configured:
        return Path(configured).expanduser()
    return Path.home() / ".config" / "command-diagnostics" / "config.yaml"


def load_config(path: Path | None = None) -> DiagnosticsConfig:
    """Load configuration from YAML, then apply environment overrides.

    A missing file yields the defaults. An unreadable or malformed file
    raises, since silently dropping redaction settings is not acceptable.

    Raises:
        OSError: The file exists but cannot be read
        yaml.YAMLError: The file is not valid YAML
        pydantic.ValidationError: The settings are invalid
    """
    config_file = path if path is not None else get_config_file()
    data: dict = {}
    if config_file.exists():
        data = yaml.safe_load(config_file.read_text()) or {}
        logger.debug("Loaded diagnostics config from %s", config_file)
    else:
        logger.debug("No diagnostics config at %s; using defaults", config_file)

    config = DiagnosticsConfig.model_validate(data)

    redact_env = os.environ.get(ENV_REDACT_LOGS)
    if redact_env is not None:
        config.redact_logs = redact_env.strip().lower() in _TRUTHY
    return config


def apply_config(config: DiagnosticsConfig, registry: CommandRegistry | None = None) -> None:
    """Apply ``config`` to the process.

    Sets the global redaction mode and registers the command table, replacing
    descriptors of the same name.
    """
    registry = registry if registry is not None else get_registry()
    for spec in config.command_specs():
        registry.register_command(spec, replace=True)
    set_should_redact_logs(config.redact_logs)
    logger.info(
        "Applied diagnostics config: redact_logs=%s, %d command override(s)",
        config.redact_logs,
        len(config.commands),
    )
