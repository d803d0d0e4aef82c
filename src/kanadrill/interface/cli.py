"""kana-drill CLI: interactive drill loop, set listing and config inspection."""

import json
import logging
import random
import sys
from typing import Annotated

import typer

from kanadrill.application.config import AppConfig, resolve_config
from kanadrill.application.factory import available_sets
from kanadrill.application.session import StudySession
from kanadrill.domain.constants import COMMAND_PREFIX, PROMPT_MARKER
from kanadrill.domain.errors import (
    AssetError,
    DistributionError,
    KanaDrillError,
    UnknownCommandError,
)
from kanadrill.interface.commands import HELP_TEXT, CommandKind, parse_input

# ---------------------------------------------------------------------------
# Root app
# ---------------------------------------------------------------------------

app = typer.Typer(
    help="kanadrill: adaptive hiragana and katakana drills.",
    rich_markup_mode="rich",
)

config_app = typer.Typer(help="Inspect kanadrill configuration.")
app.add_typer(config_app, name="config")

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def _configure_logging(verbose: int) -> None:
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.getLogger().setLevel(level)


def humanize_error(exc: Exception) -> str:
    """Render an error for the terminal."""
    if isinstance(exc, AssetError):
        return f"Bundled vocabulary is broken: {exc}"
    if isinstance(exc, DistributionError):
        return f"Failed to build the sampling distribution: {exc}"
    return str(exc)


# ---------------------------------------------------------------------------
# Session construction and loop
# ---------------------------------------------------------------------------


def build_session(config: AppConfig) -> StudySession:
    rng = random.Random(config.seed)
    return StudySession.from_set_names(config.set_names(), rng=rng)


def read_line() -> str | None:
    """Read one line from stdin; None at end of input."""
    try:
        line = sys.stdin.readline()
    except OSError as e:
        raise KanaDrillError(f"Failed to read line from stdin: {e}") from e
    if line == "":
        return None
    return line.strip()


def show_weights(session: StudySession) -> None:
    for weight, item in session.weighted_items():
        typer.echo(f"{item.front} / {item.back} / {weight:<3}")
    typer.echo()


def run_session(session: StudySession) -> None:
    """
    Prompt loop. Each answer updates the weights exactly once; help,
    weights and invalid commands leave them untouched.
    """
    while True:
        drawn = session.sample()
        if drawn is None:
            typer.echo("No items available for study. Exiting session.")
            return

        index, item = drawn
        typer.echo(f"\n{item.front}")
        typer.echo(PROMPT_MARKER, nl=False)

        line = read_line()
        if line is None:
            typer.echo()
            typer.echo("Quitting...")
            return

        try:
            parsed = parse_input(line)
        except UnknownCommandError as e:
            typer.secho(
                f"Invalid command: {e}. Type {COMMAND_PREFIX}q to quit.", fg="red", err=True
            )
            continue

        if parsed.kind is CommandKind.HELP:
            typer.echo(HELP_TEXT)
            continue
        if parsed.kind is CommandKind.WEIGHTS:
            show_weights(session)
            continue
        if parsed.kind is CommandKind.QUIT:
            typer.echo("Quitting...")
            return

        if session.answer(index, item, parsed.text):
            typer.secho("Correct!", fg="green")
        else:
            typer.echo(f"Incorrect. The correct answer is: {item.back}")


# ---------------------------------------------------------------------------
# Root command
# ---------------------------------------------------------------------------


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    sets: Annotated[
        str | None,
        typer.Option(
            "--sets", "-s", help="Comma-separated set identifiers, e.g. hiragana,katakana."
        ),
    ] = None,
    list_sets: Annotated[
        bool, typer.Option("--list", "-l", help="List available sets and exit.")
    ] = False,
    seed: Annotated[
        int | None, typer.Option(help="Seed the sampler for a reproducible session.")
    ] = None,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Increase verbosity. Repeat for more detail."
        ),
    ] = 0,
):
    """[bold green]Drill[/bold green] kana; missed items come back more often."""
    if ctx.invoked_subcommand is not None:
        return

    config = resolve_config({"sets": sets, "seed": seed, "verbose": verbose or None})
    _configure_logging(config.verbose)

    if list_sets:
        typer.echo(f"Available sets: {', '.join(available_sets())}")
        raise typer.Exit()

    try:
        session = build_session(config)

        typer.echo(
            f"Starting session for {len(session.items)} items from sets: "
            f"{', '.join(session.store.display_sets())}"
        )
        typer.echo(f"Type '{COMMAND_PREFIX}h' for commands.")

        run_session(session)
    except KanaDrillError as e:
        typer.secho(humanize_error(e), fg="red", err=True)
        raise typer.Exit(1)


# ---------------------------------------------------------------------------
# Config subgroup
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show():
    """Display final resolved configuration."""
    config = resolve_config()
    typer.echo(json.dumps(config.model_dump(), indent=2))
