"""bloodcell analyze — classify and count cells in one image array."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click
from rich.table import Table

from bloodcell.cli.utils import console, error_handler

if TYPE_CHECKING:
    from bloodcell.core.models import AnalysisResult


def _cluster_rows(result: AnalysisResult) -> list[dict[str, Any]]:
    rows = []
    for c in result.clusters:
        box = c.bounding_box
        rows.append({
            "label": c.label,
            "type": c.cell_type.value,
            "size": c.size,
            "estimate": c.estimated_count,
            "x": box.min_x,
            "y": box.min_y,
            "w": box.width,
            "h": box.height,
        })
    return rows


def _print_table(result: AnalysisResult) -> None:
    from bloodcell.analyze.rendering import summarize

    table = Table(show_header=True, title="Clusters")
    columns = ["label", "type", "size", "estimate", "x", "y", "w", "h"]
    for col in columns:
        if col == columns[0]:
            table.add_column(col, style="bold")
        else:
            table.add_column(col)
    for row in _cluster_rows(result):
        table.add_row(*(str(row[c]) for c in columns))
    console.print(table)

    summary = Table(show_header=True, title="Summary")
    summary.add_column("Cell type", style="bold")
    summary.add_column("Count")
    summary.add_column("Percentage")
    for s in summarize(result):
        summary.add_row(s.cell_type, str(s.count), s.percentage)
    console.print(summary)

    console.print(f"  Estimated red cells: {result.red_count}")
    console.print(f"  Estimated white cells: {result.white_count}")
    console.print(f"  Total clusters: {result.total_clusters}")
    console.print(f"  Average red size: {result.average_red_size:.1f}")


@click.command()
@click.argument("image", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--rgb", is_flag=True,
    help="Treat the array as RGB and convert it to HSV.",
)
@click.option(
    "-c", "--config", "config_path", default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="YAML threshold config. Defaults are used if omitted.",
)
@click.option(
    "--prior-average", type=click.FloatRange(min=0, min_open=True), default=None,
    help="Average single red cell size carried from a previous analysis.",
)
@click.option(
    "--format", "fmt", type=click.Choice(["table", "json"]),
    default="table", show_default=True, help="Output format.",
)
@error_handler
def analyze(
    image: str,
    rgb: bool,
    config_path: str | None,
    prior_average: float | None,
    fmt: str,
) -> None:
    """Analyze a (H, W, 3) .npy array of HSV (or RGB) pixels."""
    from bloodcell.analyze.session import AnalysisSession
    from bloodcell.core.config import AnalysisConfig
    from bloodcell.io.pixel_source import load_pixel_source
    from bloodcell.io.serialization import load_config

    config = load_config(Path(config_path)) if config_path else AnalysisConfig()
    source = load_pixel_source(Path(image), rgb=rgb)

    session = AnalysisSession(config, average_red_size=prior_average)
    result = session.analyze(source.to_grid())

    if fmt == "json":
        console.print(json.dumps({
            "red_count": result.red_count,
            "white_count": result.white_count,
            "total_clusters": result.total_clusters,
            "average_red_size": result.average_red_size,
            "clusters": _cluster_rows(result),
        }, indent=2))
    else:
        _print_table(result)
