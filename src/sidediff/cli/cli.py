"""CLI entrypoint: Typer app definition, logging setup, and command registration"""

import logging
from typing import Annotated

import typer

from sidediff.cli.commands import (
    add_cmd, clear_cmd, compare_cmd, diff_cmd, init_cmd,
    list_cmd, remove_cmd, show_cmd, stats_cmd,
)
from sidediff.config import load_config


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Configure root logging for the CLI."""
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


app = typer.Typer(name="sidediff", no_args_is_help=True, help="Side-by-side word and byte text comparison")


@app.callback()
def main(verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False):
    if verbose:
        setup_logging("DEBUG")
        return
    try:
        setup_logging(load_config().log_level)
    except ValueError:
        setup_logging()  # each command reports the config error itself


app.command(name="init")(init_cmd)
app.command(name="add")(add_cmd)
app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
app.command(name="remove")(remove_cmd)
app.command(name="clear")(clear_cmd)
app.command(name="stats")(stats_cmd)
app.command(name="compare")(compare_cmd)
app.command(name="diff")(diff_cmd)
