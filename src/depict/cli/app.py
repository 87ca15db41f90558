"""Main CLI application."""

from typing import Annotated

import typer

from depict.cli.commands import config, describe, key

app = typer.Typer(
    name="depict",
    help="Depict - describe images with Google AI Studio",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Depict - describe images with Google AI Studio."""
    from depict.logging import configure_logging

    configure_logging(level="DEBUG" if verbose else None, use_rich=True)


describe.register(app)
key.register(app)
config.register(app)


if __name__ == "__main__":
    app()
