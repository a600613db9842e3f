"""Wrap the chart in a browser page."""

from __future__ import annotations

import html
import logging
from pathlib import Path

from .data import SalesDataset
from .render import ChartOptions, render_svg

logger = logging.getLogger(__name__)

PAGE_FILENAME = "index.html"
SVG_FILENAME = "chart.svg"


def render_page(svg_markup: str, title: str = "Sales") -> str:
    """HTML5 page with the chart inlined in ``#sales-graph``."""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '  <meta charset="utf-8">\n'
        '  <meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"  <title>{html.escape(title)}</title>\n"
        "</head>\n"
        "<body>\n"
        '  <div id="sales-graph">\n'
        f"{svg_markup}\n"
        "  </div>\n"
        "</body>\n"
        "</html>\n"
    )


def write_page(
    dataset: SalesDataset,
    output_dir: str | Path,
    options: ChartOptions | None = None,
) -> Path:
    """Write index.html and a standalone chart.svg into ``output_dir``.

    Returns the path to the page.
    """
    options = options or ChartOptions()
    dest = Path(output_dir)
    dest.mkdir(parents=True, exist_ok=True)

    svg_markup = render_svg(dataset, options)
    (dest / SVG_FILENAME).write_text(svg_markup + "\n", encoding="utf-8")

    page_path = dest / PAGE_FILENAME
    page_path.write_text(render_page(svg_markup, options.title or "Sales"), encoding="utf-8")
    logger.debug("wrote %s and %s", page_path, SVG_FILENAME)
    return page_path
