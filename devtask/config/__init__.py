"""Configuration for system prompt resolution."""

from devtask.config.errors import ConfigError, MissingSystemPromptError
from devtask.config.schema import PromptConfig, ToolNamesConfig
from devtask.config.signals import OverrideSignal, SignalMode, parse_signal

__all__ = [
    "ConfigError",
    "MissingSystemPromptError",
    "OverrideSignal",
    "PromptConfig",
    "SignalMode",
    "ToolNamesConfig",
    "parse_signal",
]
