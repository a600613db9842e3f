"""Static rendition of the sales chart: figure(), save(), sales_chart()."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np

from .data import SalesDataset
from .render import ChartOptions, make_scales
from .style import apply
from .theme import CATEGORY10, LAYOUT

logger = logging.getLogger(__name__)

# Default output directory, overridable from the environment
OUTPUT_DIR = Path(os.environ.get("SALES_GRAPH_OUTPUT_DIR", "build"))


def _ensure_style() -> None:
    """Apply the chart style if not already applied."""
    apply()


def figure(
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """Create a styled (fig, ax) pair. Escape hatch for custom charts."""
    _ensure_style()
    fig, ax = plt.subplots(figsize=figsize)
    return fig, ax


def save(
    fig: plt.Figure,
    filename: str,
    output_dir: str | Path | None = None,
) -> Path:
    """Save a figure to the output directory (or a custom one).

    Returns the path to the saved file.
    """
    dest = Path(output_dir) if output_dir else OUTPUT_DIR
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / filename
    try:
        fig.savefig(path)
    finally:
        plt.close(fig)
    logger.debug("saved %s", path)
    return path


def sales_chart(
    dataset: SalesDataset,
    *,
    options: ChartOptions | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    **kwargs: Any,
) -> tuple[plt.Figure, plt.Axes]:
    """One line with dot markers per product, in pixel space of the SVG chart.

    The axes reuse the band/linear scales, so months sit at band centres and
    the y ticks match the interactive version.
    """
    options = options or ChartOptions()
    fig, ax = figure(figsize=figsize)
    x, y = make_scales(dataset, options)
    kwargs.setdefault("marker", "o")

    for index, (product, records) in enumerate(dataset.by_product().items()):
        xs = np.array([x.center(r.month) for r in records])
        ys = np.array([r.sales for r in records])
        ax.plot(
            xs, ys,
            color=CATEGORY10[index % len(CATEGORY10)],
            label=product,
            **kwargs,
        )

    months = dataset.months()
    ax.set_xlim(*x.range)
    ax.set_xticks([x.center(m) for m in months])
    ax.set_xticklabels(months)

    y_ticks = y.ticks(options.y_ticks)
    label_of = y.tick_format(options.y_ticks)
    top = y.domain[1] or 1.0
    # Leave room for the dot radius above the highest value
    ax.set_ylim(y.domain[0], top + top * LAYOUT["dot_radius"] / max(options.inner_height, 1))
    ax.set_yticks(y_ticks)
    ax.set_yticklabels([label_of(v) for v in y_ticks])

    if options.title:
        ax.set_title(options.title)
    if options.x_label:
        ax.set_xlabel(options.x_label)
    if options.y_label:
        ax.set_ylabel(options.y_label)
    if months:
        ax.legend(loc="upper right")

    if filename:
        save(fig, filename, output_dir)

    return fig, ax
