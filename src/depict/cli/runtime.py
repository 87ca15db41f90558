"""Shared wiring for CLI command handlers."""

import tomllib
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape

from depict.cli.console import console, error
from depict.config import DepictConfig, load_config
from depict.credentials import CredentialStore, JSONFileStore
from depict.images.gemini import GeminiClient
from depict.images.service import ImageDescriptionService

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to configuration file"),
]


def load_config_or_exit(path: Path | None) -> DepictConfig:
    """Load configuration, exiting with a message when it is unusable."""
    try:
        return load_config(path)
    except FileNotFoundError as e:
        error(escape(str(e)))
        raise typer.Exit(1) from None
    except tomllib.TOMLDecodeError as e:
        error(f"Invalid TOML: {escape(str(e))}")
        raise typer.Exit(1) from None
    except ValidationError as e:
        error("Configuration validation failed:")
        for err in e.errors():
            loc = ".".join(str(x) for x in err["loc"])
            console.print(f"  [yellow]{loc}[/yellow]: {escape(err['msg'])}")
        raise typer.Exit(1) from None


def create_credential_store(config: DepictConfig) -> CredentialStore:
    return CredentialStore(
        JSONFileStore(config.storage.path),
        key=config.storage.credential_key,
    )


def create_client(config: DepictConfig) -> GeminiClient:
    return GeminiClient(config.gemini)


def create_service(
    config: DepictConfig, client: GeminiClient
) -> ImageDescriptionService:
    return ImageDescriptionService(
        credentials=create_credential_store(config),
        client=client,
        config=config,
    )
