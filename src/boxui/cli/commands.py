"""
Command-line interface for boxui.

Provides the CLI command group and registers individual subcommands.
"""

from __future__ import annotations

import click

from .. import __version__
from ..logging_config import LogConfig, configure_logging, resolve_log_level, teardown_logging
from .measure import measure
from .render import render


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", is_flag=True, help="Log layout decisions to stderr.")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this file.")
@click.pass_context
def main(ctx, verbose, log_file):
    """boxui - draw element trees as bordered terminal boxes."""
    try:
        level = resolve_log_level(verbose)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e

    if level is None and not log_file:
        return
    handler_ids = configure_logging(
        LogConfig(level=level or "INFO", file=log_file, console=level is not None)
    )
    ctx.call_on_close(lambda: teardown_logging(handler_ids))


# Register CLI subcommands
main.add_command(measure)
main.add_command(render)


if __name__ == "__main__":
    main()
