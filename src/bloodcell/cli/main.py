"""bloodcell CLI — top-level Click group."""

from __future__ import annotations

import click


@click.group()
@click.version_option(package_name="bloodcell")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging and full tracebacks on errors.")
def cli(verbose: bool) -> None:
    """bloodcell — Red and white blood cell counting."""
    from bloodcell.cli import utils

    utils.verbose = verbose
    utils.configure_logging(verbose)


def _register_commands() -> None:
    """Register all subcommands — imports deferred to avoid loading numpy at startup."""
    from bloodcell.cli.analyze import analyze
    from bloodcell.cli.config_cmd import config_cmd

    cli.add_command(analyze)
    cli.add_command(config_cmd)


_register_commands()
