"""Entry point for running devtask as a module: python -m devtask"""

from devtask.cli.commands import app

if __name__ == "__main__":
    app()
