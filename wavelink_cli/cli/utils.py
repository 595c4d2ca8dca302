"""CLI utility functions for the Wave Link CLI."""
from __future__ import annotations

import logging

import typer

from wavelink_cli.session import CommandRunner
from wavelink_cli.validators import parse_percent

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _configure_logging(verbose: bool) -> None:
    """Configure root logging once per invocation: WARNING by default, DEBUG when verbose."""

    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.WARNING)


def _get_runner(ctx: typer.Context) -> CommandRunner:
    """Return the command runner prepared by the root callback."""

    runner = ctx.find_object(CommandRunner)
    if runner is None:
        raise RuntimeError("Command runner is not initialised; invoke commands through the root app")
    return runner


def _parse_percent_argument(runner: CommandRunner, value: str, name: str) -> int:
    """Validate a percentage argument, reporting failure before any session is opened."""

    with runner.reporting():
        return parse_percent(value, name)
