"""Diagnostics for the resolved runtime settings."""
from __future__ import annotations

import json
import os

import typer

from ..config import get_settings

__all__ = ["app"]

app = typer.Typer(help="Inspect the settings resolved from the environment.", add_completion=False)

_ENV_VARIABLES = ("UNICONV_PROMPT", "UNICONV_LOG_FILE", "UNICONV_LOG_LEVEL")


@app.command("show")
def show_settings(
    refresh: bool = typer.Option(
        False,
        "--refresh",
        help="Ignore the cache and rebuild the settings from the environment.",
    ),
) -> None:
    """Print the resolved settings and the environment variables that were set."""

    settings = get_settings(refresh=refresh)
    payload = {
        "settings": settings.as_dict(),
        "environment": {name: os.environ[name] for name in _ENV_VARIABLES if name in os.environ},
    }
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
