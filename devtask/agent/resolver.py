"""System prompt resolution: built-in default, file override, write-back and memory."""

from pathlib import Path

from loguru import logger

from devtask.config.errors import MissingSystemPromptError
from devtask.config.schema import PromptConfig
from devtask.prompts.system import render_system_prompt

MEMORY_SEPARATOR = "\n\n---\n\n"


class PromptResolver:
    """
    Resolves the system prompt handed to the agent at session start.

    The base text is either the built-in prompt or the contents of an
    override file (``system_md``). The base text can be written back to
    disk (``write_system_md``) so the default can be captured and edited.
    User memory is appended last and is never written back.
    """

    def __init__(self, config: PromptConfig | None = None, cwd: Path | None = None):
        self.config = config or PromptConfig()
        self.cwd = cwd or Path.cwd()

    @property
    def default_path(self) -> Path:
        return self.config.default_system_md_path(self.cwd)

    def override_path(self) -> Path | None:
        """Absolute override file path, or None when the override is disabled."""
        return self.config.system_md_signal.resolve_path(self.default_path, self.cwd)

    def write_path(self) -> Path | None:
        """Absolute write-back target, or None when write-back is disabled."""
        return self.config.write_system_md_signal.resolve_path(self.default_path, self.cwd)

    def resolve_base_text(self) -> str:
        """
        Get the base system prompt.

        Returns:
            The override file's contents verbatim, or the trimmed built-in prompt.

        Raises:
            MissingSystemPromptError: If the override is enabled but its file does not exist.
        """
        path = self.override_path()
        if path is None:
            logger.debug("Using built-in system prompt")
            return render_system_prompt(self.config.tools)

        if not path.exists():
            raise MissingSystemPromptError(path)

        logger.info(f"Loading system prompt override from {path}")
        return path.read_text(encoding="utf-8")

    def maybe_persist(self, text: str) -> Path | None:
        """Write *text* to the write-back target if one is configured.

        Returns the path written, or None if write-back is disabled.
        """
        path = self.write_path()
        if path is None:
            return None

        path.write_text(text, encoding="utf-8")
        logger.info(f"Wrote system prompt to {path}")
        return path

    def resolve(self, memory: str | None = None) -> str:
        """Resolve the full system prompt, with user memory appended if given."""
        base = self.resolve_base_text()
        self.maybe_persist(base)
        return base + memory_suffix(memory)


def memory_suffix(memory: str | None) -> str:
    """Separator plus trimmed memory, or empty for blank memory."""
    if memory and memory.strip():
        return f"{MEMORY_SEPARATOR}{memory.strip()}"
    return ""


def get_core_system_prompt(
    memory: str | None = None,
    config: PromptConfig | None = None,
) -> str:
    """Resolve the system prompt using settings from the environment unless *config* is given."""
    return PromptResolver(config).resolve(memory)
