"""devtask - system prompt resolution for a software-engineering agent."""

__version__ = "0.1.0"
__logo__ = "🛠️"
