"""Command-line interface for devtask."""
