from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer

from .._version import __version__
from ..config import Settings, get_settings
from ..conversion.schemas import ConversionPayload, UnitPayload
from ..conversion.session import evaluate, log_outcome, run_session
from ..conversion.units import UnitCategory, iter_units
from ..utils.logging import SessionLog, configure_json_logger, flush_handlers
from .config import app as config_app


__all__ = ["app", "run"]


app = typer.Typer(help="Convert lengths, weights and temperatures written in plain English", add_completion=False)


class CategoryOption(str, Enum):
    length = "length"
    weight = "weight"
    temperature = "temperature"

    def to_category(self) -> UnitCategory:
        return UnitCategory[self.name.upper()]


def _settings(ctx: typer.Context) -> Settings:
    if isinstance(ctx.obj, Settings):
        return ctx.obj
    return get_settings()


def _interactive(settings: Settings, prompt: Optional[str] = None) -> None:
    logger = configure_json_logger(settings.log_file, settings.log_level)
    try:
        run_session(
            typer.get_text_stream("stdin"),
            lambda text: typer.echo(text, nl=False),
            prompt=prompt if prompt is not None else settings.prompt,
            logger=logger,
        )
    finally:
        flush_handlers(logger)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show uniconv version and exit", is_eager=True),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", dir_okay=False, help="Write JSONL events to this file (env: UNICONV_LOG_FILE)"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging threshold, e.g. info or debug (env: UNICONV_LOG_LEVEL)"
    ),
) -> None:
    """Start an interactive session when no sub-command is given."""

    if version:
        typer.echo(f"uniconv {__version__}")
        raise typer.Exit()

    try:
        settings = get_settings(log_file=log_file, log_level=log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        _interactive(settings)


@app.command("session")
def session_command(
    ctx: typer.Context,
    prompt: Optional[str] = typer.Option(None, "--prompt", help="Text shown before each request (env: UNICONV_PROMPT)"),
) -> None:
    """Read requests from stdin until 'exit' or end of input."""

    _interactive(_settings(ctx), prompt)


@app.command("convert", context_settings={"ignore_unknown_options": True})
def convert_command(
    ctx: typer.Context,
    words: List[str] = typer.Argument(..., help="Request such as: 10 km to miles"),
    as_json: bool = typer.Option(False, "--json", help="Print the structured outcome as JSON"),
) -> None:
    """Answer a single conversion request."""

    settings = _settings(ctx)
    logger = configure_json_logger(settings.log_file, settings.log_level)
    line = " ".join(words)
    outcome = evaluate(line)
    log_outcome(SessionLog(logger), line, outcome)
    flush_handlers(logger)

    if as_json:
        payload = ConversionPayload.from_outcome(line, outcome)
        typer.echo(json.dumps(payload.model_dump(), indent=2, ensure_ascii=False, default=str))
    else:
        typer.echo(outcome.message)

    if not outcome.ok:
        raise typer.Exit(code=1)


@app.command("units")
def units_command(
    category: Optional[CategoryOption] = typer.Option(
        None, "--category", case_sensitive=False, help="Only list units of this category"
    ),
) -> None:
    """List the supported units and their accepted spellings."""

    selected = category.to_category() if category is not None else None
    payload = [UnitPayload.from_definition(unit).model_dump() for unit in iter_units(selected)]
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


app.add_typer(config_app, name="config")


def run() -> None:
    """Entry point compatible with ``python -m uniconv`` and console scripts."""

    from typer.main import get_command

    cli = get_command(app)
    cli()
