"""Configuration module for command diagnostics."""

from command_diagnostics.config.settings import (
    ENV_CONFIG_FILE,
    ENV_REDACT_LOGS,
    CommandOverride,
    DiagnosticsConfig,
    apply_config,
    get_config_file,
    load_config,
)

__all__ = [
    "ENV_CONFIG_FILE",
    "ENV_REDACT_LOGS",
    "CommandOverride",
    "DiagnosticsConfig",
    "apply_config",
    "get_config_file",
    "load_config",
]
