"""Describe an image."""

import asyncio
import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from depict.cli.console import console, dim, error
from depict.cli.runtime import (
    ConfigOption,
    create_client,
    create_service,
    load_config_or_exit,
)
from depict.config import DepictConfig
from depict.errors import DepictError
from depict.images.types import AnalysisResult, UploadCandidate


async def _describe(config: DepictConfig, image: Path) -> AnalysisResult:
    candidate = UploadCandidate.from_path(image)
    async with create_client(config) as client:
        service = create_service(config, client)
        with console.status(f"Analyzing {escape(candidate.name)}..."):
            return await service.describe(candidate)


def _print_result(result: AnalysisResult) -> None:
    from rich.panel import Panel
    from rich.text import Text

    local_time = result.created_at.astimezone()
    console.print(
        Panel(
            Text(result.description),
            title=escape(result.file_name),
            subtitle=f"Analyzed on {local_time:%Y-%m-%d} at {local_time:%H:%M:%S}",
            expand=False,
        )
    )


def register(app: typer.Typer) -> None:
    """Register the describe command."""

    @app.command()
    def describe(
        image: Annotated[
            Path,
            typer.Argument(help="JPEG, PNG or WebP image, up to 10MB"),
        ],
        as_json: Annotated[
            bool,
            typer.Option("--json", help="Print the result as JSON"),
        ] = False,
        config: ConfigOption = None,
    ) -> None:
        """Describe an image with Google AI Studio.

        Examples:
            depict describe photo.jpg
            depict describe photo.png --json
        """

        config_obj = load_config_or_exit(config)

        try:
            result = asyncio.run(_describe(config_obj, image))
        except DepictError as e:
            error(escape(str(e)))
            raise typer.Exit(1) from None
        except KeyboardInterrupt:
            dim("\nCancelled.")
            raise typer.Exit(1) from None

        if as_json:
            console.print_json(json.dumps(result.to_dict()))
        else:
            _print_result(result)
