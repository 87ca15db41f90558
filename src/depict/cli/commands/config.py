"""Configuration management commands."""

import tomllib
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from depict.cli.console import console, dim, error, success


def register(app: typer.Typer) -> None:
    """Register the config command."""

    @app.command()
    def config(
        ctx: typer.Context,
        action: Annotated[
            str | None,
            typer.Argument(help="Action: show, validate, paths"),
        ] = None,
        path: Annotated[
            Path | None,
            typer.Option(
                "--path",
                "-p",
                help="Path to config file (default: ./depict.toml or $DEPICT_HOME/config.toml)",
            ),
        ] = None,
    ) -> None:
        """Inspect configuration."""
        if action is None:
            typer.echo(ctx.get_help())
            raise typer.Exit(0)

        from pydantic import ValidationError
        from rich.syntax import Syntax
        from rich.table import Table

        from depict.config import find_config_path, load_config
        from depict.config.paths import get_all_paths

        if action == "paths":
            for name, value in get_all_paths().items():
                console.print(f"[bold]{name}[/bold]: {escape(str(value))}")
            return

        if action not in ("show", "validate"):
            error(f"Unknown action: {escape(action)}")
            console.print("Valid actions: show, validate, paths")
            raise typer.Exit(1)

        try:
            config_path = find_config_path(path)
        except FileNotFoundError as e:
            error(escape(str(e)))
            raise typer.Exit(1) from None

        if action == "show":
            if config_path is None:
                dim("No config file found; using built-in defaults.")
                return
            content = config_path.read_text()
            syntax = Syntax(content, "toml", theme="monokai", line_numbers=True)
            console.print(f"[bold]Config file: {escape(str(config_path))}[/bold]\n")
            console.print(syntax)
            return

        try:
            config_obj = load_config(config_path)
        except tomllib.TOMLDecodeError as e:
            error(f"Invalid TOML: {escape(str(e))}")
            raise typer.Exit(1) from None
        except ValidationError as e:
            error("Configuration validation failed:")
            console.print()
            for err in e.errors():
                loc = ".".join(str(x) for x in err["loc"])
                console.print(f"  [yellow]{loc}[/yellow]: {escape(err['msg'])}")
            raise typer.Exit(1) from None

        table = Table(title="Configuration Summary")
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")
        table.add_row("Source", str(config_path) if config_path else "defaults")
        table.add_row("Model", config_obj.gemini.model)
        table.add_row("Endpoint", config_obj.gemini.endpoint)
        table.add_row("Temperature", str(config_obj.gemini.temperature))
        table.add_row("Max output tokens", str(config_obj.gemini.max_output_tokens))
        table.add_row("Upload types", ", ".join(config_obj.upload.allowed_mime_types))
        table.add_row("Upload limit", f"{config_obj.upload.max_bytes} bytes")
        table.add_row("Key store", str(config_obj.storage.path))

        success("Configuration is valid!")
        console.print()
        console.print(table)
