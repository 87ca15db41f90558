"""API key management commands."""

from typing import Annotated

import typer

from depict.cli.console import console, dim, error, success
from depict.cli.runtime import (
    ConfigOption,
    create_credential_store,
    load_config_or_exit,
)


def register(app: typer.Typer) -> None:
    """Register the key command group."""

    key_app = typer.Typer(name="key", help="Manage the Google AI Studio API key")

    @key_app.command("set")
    def set_key(
        value: Annotated[
            str | None,
            typer.Argument(help="API key (prompted for when omitted)"),
        ] = None,
        config: ConfigOption = None,
    ) -> None:
        """Save the API key.

        Examples:
            depict key set              # Prompt without echoing
            depict key set AIza...      # Pass it directly
        """

        if value is None:
            value = typer.prompt("API key", hide_input=True, default="")
        value = value.strip()
        if not value:
            error("Please enter a valid API key.")
            raise typer.Exit(1)

        store = create_credential_store(load_config_or_exit(config))
        store.set(value)
        success("API key saved.")

    @key_app.command("show")
    def show_key(
        reveal: Annotated[
            bool,
            typer.Option("--reveal", help="Print the full key"),
        ] = False,
        config: ConfigOption = None,
    ) -> None:
        """Show the stored API key (masked by default)."""
        from depict.credentials import mask_credential

        store = create_credential_store(load_config_or_exit(config))
        value = store.get()
        if value is None:
            dim("No API key stored.")
            console.print("Run [bold]depict key set[/bold] to add one.")
            raise typer.Exit(1)

        console.print(value if reveal else mask_credential(value), markup=False)

    @key_app.command("clear")
    def clear_key(config: ConfigOption = None) -> None:
        """Remove the stored API key."""

        store = create_credential_store(load_config_or_exit(config))
        if store.get() is None:
            dim("No API key stored.")
            return
        store.clear()
        success("API key removed.")

    app.add_typer(key_app)
