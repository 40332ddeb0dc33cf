"""Configuration errors."""

from pathlib import Path


class ConfigError(Exception):
    """Raised when the prompt configuration cannot be honoured."""


class MissingSystemPromptError(ConfigError):
    """Raised when a system prompt override is enabled but its file is absent."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"missing system prompt file '{path}'")
