"""bloodcell config — write the default analysis configuration."""

from __future__ import annotations

from pathlib import Path

import click

from bloodcell.cli.utils import console, error_handler


@click.command("config")
@click.option(
    "-o", "--output", required=True, type=click.Path(dir_okay=False),
    help="YAML file to write.",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file.")
@error_handler
def config_cmd(output: str, force: bool) -> None:
    """Write the default thresholds to a YAML file for editing."""
    from bloodcell.core.config import AnalysisConfig
    from bloodcell.io.serialization import save_config

    path = Path(output)
    if path.exists() and not force:
        console.print(f"[red]Error:[/red] {path} already exists (use --force)")
        raise SystemExit(1)

    save_config(AnalysisConfig(), path)
    console.print(f"[green]Wrote default config[/green] to {path}")
