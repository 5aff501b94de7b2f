"""Command-line interface for AKA Timestamps."""

import asyncio
import sys
import warnings
from collections.abc import Coroutine
from pathlib import Path
from typing import Any, TypeVar

import click
from rich.console import Console

from akatimestamps.core.config import LOCAL_DEV_BASE_URL, AkaConfig, load_config
from akatimestamps.core.errors import ConfigError, QuestionLookupError
from akatimestamps.core.export import episode_status_message, export_results
from akatimestamps.output import display_episodes, display_timeline
from akatimestamps.services.clipboard import copy_timeline
from akatimestamps.session import Session

T = TypeVar("T")


@click.group()
@click.version_option(package_name="akatimestamps")
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file to use instead of .akats/config",
)
@click.option(
    "--local",
    is_flag=True,
    help=f"Use the development server at {LOCAL_DEV_BASE_URL}",
)
@click.option("--verbose", "-v", is_flag=True, help="Show warnings about degraded results")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, local: bool, verbose: bool) -> None:
    """AKA Timestamps - question timestamps for the Ask Kati Anything podcast.

    Lists the analysed episodes, shows and exports their question
    timestamps, and asks the episode service to look for new videos.
    """
    try:
        config = load_config(local_path=config_path)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if local:
        config.api.base_url = LOCAL_DEV_BASE_URL
    ctx.obj = config


def _run(coro: Coroutine[Any, Any, T]) -> T:
    """Run a command coroutine, hiding degraded-result warnings unless --verbose."""
    verbose = click.get_current_context().find_root().params.get("verbose", False)
    with warnings.catch_warnings():
        if not verbose:
            warnings.simplefilter("ignore", UserWarning)
        return asyncio.run(coro)


@main.command()
@click.pass_obj
def episodes(config: AkaConfig) -> None:
    """List the episodes and how many timestamps each one has."""

    async def run() -> None:
        async with Session(config) as session:
            await session.activate()
            display_episodes(session.directory.episodes or [], Console(), session.theme)

    _run(run())


@main.command()
@click.argument("number", type=int)
@click.pass_obj
def show(config: AkaConfig, number: int) -> None:
    """Show the question timestamps of episode NUMBER."""

    async def run() -> bool:
        async with Session(config) as session:
            await session.activate()
            episode = session.directory.get(number)
            if episode is None:
                return False
            display_timeline(episode, Console(), session.theme)
            return True

    try:
        found = _run(run())
    except QuestionLookupError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not found:
        click.echo(f"Error: Episode {number} not found", err=True)
        sys.exit(1)


@main.command()
@click.argument("number", type=int)
@click.option("--copy", "to_clipboard", is_flag=True, help="Also copy the text to the clipboard")
@click.pass_obj
def export(config: AkaConfig, number: int, to_clipboard: bool) -> None:
    """Print copy-ready timestamps of episode NUMBER.

    Example: akats export 42 --copy
    """

    async def run() -> bool:
        async with Session(config) as session:
            await session.activate()
            episode = session.directory.get(number)
            if episode is None:
                return False

            status = episode_status_message(episode)
            if status is not None:
                click.echo(status)
                return True

            results = episode.found_results
            assert results is not None
            click.echo(export_results(results))

            if to_clipboard and await copy_timeline(results, session.clipboard):
                click.echo("Copied to clipboard.", err=True)
            return True

    try:
        found = _run(run())
    except QuestionLookupError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not found:
        click.echo(f"Error: Episode {number} not found", err=True)
        sys.exit(1)


@main.command()
@click.option("--key", "-k", help="Access key (default: the last key used)")
@click.pass_obj
def refresh(config: AkaConfig, key: str | None) -> None:
    """Ask the episode service to look for new videos.

    Requires an access key; the key is remembered for next time, even
    when the service rejects it.
    """

    async def run() -> bool:
        async with Session(config) as session:
            await session.activate()
            controller = session.controller
            controller.open()
            if key is not None:
                controller.set_key(key)

            click.echo("Checking for new videos..")
            if not await controller.trigger():
                click.echo(f"Error: {controller.last_error()}", err=True)
                return False

            count = len(session.directory.episodes or [])
            click.echo(f"Directory refreshed: {count} episodes.")
            return True

    if not _run(run()):
        sys.exit(1)


if __name__ == "__main__":
    main()
