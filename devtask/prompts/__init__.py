"""Built-in prompt templates."""

from devtask.prompts.compression import COMPRESSION_SYSTEM_PROMPT, get_compression_prompt
from devtask.prompts.system import SYSTEM_PROMPT_TEMPLATE, render_system_prompt

__all__ = [
    "COMPRESSION_SYSTEM_PROMPT",
    "SYSTEM_PROMPT_TEMPLATE",
    "get_compression_prompt",
    "render_system_prompt",
]
