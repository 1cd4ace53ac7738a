"""Command contribution CLI (validate, list, schema)"""

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..commands import Command, CommandRegistry, collect_messages, describe_schema, handle_commands
from ..config import load_settings
from ..extensions import ExtensionPointUser, load_extension_users

console = Console()


def _load_commands(
    directories: Optional[List[Path]],
    config: Optional[Path],
    verbose: bool,
) -> tuple[list[ExtensionPointUser], tuple[Command, ...]]:
    """Scan extension directories and run their contributions through the pipeline"""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    settings = load_settings(config)
    dirs = list(directories or []) or [Path(d) for d in settings.extensions_dirs]
    if not dirs:
        console.print("[red]Error:[/red] no extension directories given")
        raise typer.Exit(2)

    users = load_extension_users(dirs, point=settings.extension_point, manifest_name=settings.manifest_name)
    commands = handle_commands(users, CommandRegistry(), settings)
    return users, commands


def _print_commands(commands: tuple[Command, ...], output_json: bool) -> None:
    if output_json:
        typer.echo(json.dumps([c.to_dict() for c in commands], indent=2))
        return

    table = Table(title=f"Commands ({len(commands)})")
    table.add_column("Command", style="cyan")
    table.add_column("Title")
    table.add_column("Category")
    table.add_column("Where")
    for command in commands:
        table.add_row(
            command.command,
            command.title,
            command.category or "",
            ", ".join(location.value for location in command.where),
        )
    console.print(table)


def register_commands_commands(app: typer.Typer):
    """Register contribution commands to the main app"""

    @app.command("validate")
    def validate(
        directories: Optional[List[Path]] = typer.Argument(None, help="Extension directories to scan"),
        config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings file"),
        output_json: bool = typer.Option(False, "--json", help="Print accepted commands as JSON"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    ):
        """Validate the command contributions of extensions"""
        users, commands = _load_commands(directories, config, verbose)
        _print_commands(commands, output_json)

        failed = False
        for description, collector in collect_messages(users):
            source = f"{description.id} ({description.extension_location})"
            for message in collector.messages:
                if message.level == "error":
                    failed = True
                    console.print(f"[red]✗[/red] {source}: {message.message}")
                else:
                    console.print(f"[yellow]⚠[/yellow]  {source}: {message.message}")

        if failed:
            raise typer.Exit(1)

    @app.command("list")
    def list_commands(
        directories: Optional[List[Path]] = typer.Argument(None, help="Extension directories to scan"),
        config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings file"),
        output_json: bool = typer.Option(False, "--json", help="Print commands as JSON"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    ):
        """List the commands that would be registered (invalid ones are skipped)"""
        _, commands = _load_commands(directories, config, verbose)
        _print_commands(commands, output_json)

    @app.command("schema")
    def schema():
        """Print the JSON schema of the commands contribution point"""
        typer.echo(json.dumps(describe_schema(), indent=2))


app = typer.Typer(help="Validate extension command contributions", no_args_is_help=True)
register_commands_commands(app)


def main():
    app()


if __name__ == "__main__":
    main()
