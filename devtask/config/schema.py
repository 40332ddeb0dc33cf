"""Configuration schema using Pydantic."""

import os
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from devtask.config.signals import OverrideSignal, parse_signal

CONFIG_DIR = ".devtask"
SYSTEM_MD_FILENAME = "system.md"


class ToolNamesConfig(BaseModel):
    """Names of the tools the default system prompt refers to.

    These must match the names the tool-execution layer registers.
    """
    list_directory: str = "list_directory"
    edit: str = "replace"
    glob: str = "glob"
    grep: str = "search_file_content"
    read_file: str = "read_file"
    read_many_files: str = "read_many_files"
    shell: str = "run_shell_command"
    write_file: str = "write_file"


class PromptConfig(BaseSettings):
    """Root configuration for system prompt resolution.

    ``system_md`` enables loading the system prompt from a file and
    ``write_system_md`` enables writing the base prompt back to disk. Both
    accept ``1``/``true``, ``0``/``false`` or a filesystem path.
    """
    model_config = SettingsConfigDict(
        env_prefix="DEVTASK_",
        env_nested_delimiter="__",
    )

    system_md: str | None = None
    write_system_md: str | None = None
    config_dir: str = CONFIG_DIR  # Relative entries resolve against the working directory
    tools: ToolNamesConfig = Field(default_factory=ToolNamesConfig)

    @property
    def system_md_signal(self) -> OverrideSignal:
        return parse_signal(self.system_md)

    @property
    def write_system_md_signal(self) -> OverrideSignal:
        return parse_signal(self.write_system_md)

    def default_system_md_path(self, cwd: Path | None = None) -> Path:
        """Get the absolute default override path, ``<config-dir>/system.md``."""
        base = cwd if cwd is not None else Path.cwd()
        return Path(os.path.abspath(base / self.config_dir / SYSTEM_MD_FILENAME))
