"""CLI commands for devtask."""

import os
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from devtask import __logo__, __version__

app = typer.Typer(
    name="devtask",
    help=f"{__logo__} devtask - system prompt tooling for the dev task agent",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} devtask v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """devtask - system prompt tooling for the dev task agent."""
    pass


# ============================================================================
# Prompt Commands
# ============================================================================


prompt_app = typer.Typer(help="Inspect and export agent prompts")
app.add_typer(prompt_app, name="prompt")


@prompt_app.command("show")
def prompt_show(
    memory: str = typer.Option(None, "--memory", "-m", help="Memory text to append"),
    memory_file: Path = typer.Option(
        None, "--memory-file", help="Read memory text from a file"
    ),
):
    """Print the resolved system prompt."""
    from devtask.agent.resolver import PromptResolver
    from devtask.config.errors import ConfigError

    if memory_file is not None:
        try:
            memory = memory_file.read_text(encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Error reading memory file: {e}[/red]")
            raise typer.Exit(1)

    try:
        prompt = PromptResolver().resolve(memory)
    except ConfigError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]")
        raise typer.Exit(1)

    typer.echo(prompt)


@prompt_app.command("status")
def prompt_status():
    """Show where the system prompt would come from."""
    from devtask.agent.resolver import PromptResolver

    resolver = PromptResolver()
    override = resolver.override_path()
    write_target = resolver.write_path()

    table = Table(title="System Prompt")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    if override is None:
        table.add_row("Source", "built-in")
    else:
        table.add_row("Source", "override file")
        state = "[green]✓[/green]" if override.exists() else "[red]missing[/red]"
        table.add_row("Override file", f"{override} {state}")
    table.add_row("Write target", str(write_target) if write_target else "[dim]disabled[/dim]")
    table.add_row("Default path", str(resolver.default_path))

    console.print(table)


@prompt_app.command("compression")
def prompt_compression():
    """Print the history compression prompt."""
    from devtask.prompts.compression import get_compression_prompt

    typer.echo(get_compression_prompt())


@prompt_app.command("export")
def prompt_export(
    path: Path = typer.Argument(None, help="Target file (default: .devtask/system.md)"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
):
    """Write the built-in system prompt to a file for editing."""
    from devtask.config.schema import PromptConfig
    from devtask.prompts.system import render_system_prompt

    config = PromptConfig()
    target = Path(os.path.abspath(path)) if path is not None else config.default_system_md_path()

    if target.exists() and not force:
        console.print(f"[yellow]{target} already exists[/yellow] (use --force to overwrite)")
        raise typer.Exit(1)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(render_system_prompt(config.tools), encoding="utf-8")
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Wrote system prompt to {target}")
    console.print(f"  Enable it with: DEVTASK_SYSTEM_MD={target}")


if __name__ == "__main__":
    app()
