"""Render a sales dataset into an interactive chart page.

Usage:
  sales-graph data/d3_data.json
  # writes build/index.html and build/chart.svg
  sales-graph data/d3_data.json -o site --static sales.png
  # also writes site/sales.png through matplotlib
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .charts import sales_chart
from .data import DatasetError, load_sales
from .page import SVG_FILENAME, write_page
from .render import ChartOptions


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sales-graph",
        description="Render monthly sales per product as an interactive SVG line chart.",
    )
    parser.add_argument("data", type=Path, help='JSON file shaped like {"Sales": [...]}')
    parser.add_argument(
        "-o", "--output-dir", type=Path,
        default=Path(os.environ.get("SALES_GRAPH_OUTPUT_DIR", "build")),
        help="directory for index.html and chart.svg (default: $SALES_GRAPH_OUTPUT_DIR or ./build)",
    )
    parser.add_argument("--title", help="chart title")
    parser.add_argument("--no-animate", action="store_true", help="draw lines without animation")
    parser.add_argument(
        "--static", metavar="FILENAME",
        help="also save a static matplotlib rendition (.svg, .png, .pdf) into the output directory",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _report(path: Path) -> None:
    print(f"Wrote {path} ({os.path.getsize(path)} bytes)", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )

    options = ChartOptions(title=args.title, animate=not args.no_animate)
    try:
        dataset = load_sales(args.data)
        page = write_page(dataset, args.output_dir, options)
    except (DatasetError, OSError) as e:
        print(f"sales-graph: {e}", file=sys.stderr)
        return 1

    _report(page)
    _report(page.parent / SVG_FILENAME)

    if args.static:
        try:
            sales_chart(dataset, options=options, filename=args.static, output_dir=args.output_dir)
        except (ValueError, OSError) as e:
            print(f"sales-graph: {e}", file=sys.stderr)
            return 1
        _report(args.output_dir / args.static)

    return 0


if __name__ == "__main__":
    sys.exit(main())
