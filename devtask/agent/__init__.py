"""Agent prompt resolution."""

from devtask.agent.resolver import PromptResolver, get_core_system_prompt

__all__ = ["PromptResolver", "get_core_system_prompt"]
