"""Build the interactive SVG line chart.

The document is self-contained: positions come from :mod:`.scales`, hover
and draw-in animation from an embedded ``<style>``, and product selection
from a small embedded ``<script>``. It works opened directly or inlined in
an HTML page.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

from .data import SaleRecord, SalesDataset
from .scales import BandScale, LinearScale, OrdinalScale
from .theme import CATEGORY10, COLORS, FIELDS, FONTS, LAYOUT

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
CHART_ID = "chart"

# Crisp 1px strokes land on half pixels
_OFFSET = 0.5


@dataclass
class ChartOptions:
    """Per-chart overrides of the LAYOUT defaults."""

    width: int = LAYOUT["width"]
    height: int = LAYOUT["height"]
    margin: dict = field(default_factory=lambda: dict(LAYOUT["margin"]))
    y_ticks: int = LAYOUT["y_ticks"]
    animate: bool = True
    title: str | None = None
    x_label: str | None = FIELDS["month"]
    y_label: str | None = FIELDS["sales"]

    @property
    def inner_width(self) -> float:
        return self.width - self.margin["left"] - self.margin["right"]

    @property
    def inner_height(self) -> float:
        return self.height - self.margin["top"] - self.margin["bottom"]


def fmt(x: float) -> str:
    """Short decimal for SVG attributes: 43.5, 120, -6."""
    return np.format_float_positional(round(float(x), 2), trim="-")


def js_number(x: float) -> str:
    """Render a number the way a browser's String(x) would."""
    x = float(x)
    if x == 0:
        return "0"
    if 1e-6 <= abs(x) < 1e21:
        return np.format_float_positional(x, trim="-")
    mantissa, exponent = repr(x).split("e")
    return f"{mantissa}e{int(exponent):+d}"


def tooltip(record: SaleRecord) -> str:
    return f"Sales: {js_number(record.sales)}, Gross: {js_number(record.gross)}"


def describe(dataset: SalesDataset) -> str:
    """One-sentence summary for screen readers."""
    peak = dataset.peak()
    if peak is None:
        return "Line chart with no sales data."

    products = dataset.products()
    months = dataset.months()
    noun = "product" if len(products) == 1 else "products"
    span = months[0] if len(months) == 1 else f"{months[0]} to {months[-1]}"
    return (
        f"Line chart of {FIELDS['sales']} by {FIELDS['month']} for "
        f"{len(products)} {noun}, {span}; "
        f"peak {js_number(peak.sales)} ({peak.product}, {peak.month})."
    )


def make_scales(
    dataset: SalesDataset, options: ChartOptions
) -> tuple[BandScale, LinearScale]:
    x = BandScale(
        dataset.months(),
        (0, options.inner_width),
        padding=LAYOUT["band_padding"],
    )
    y = LinearScale((0, dataset.max_sales()), (options.inner_height, 0))
    return x, y


def _font_stack() -> str:
    # Generic families (sans-serif) must stay unquoted
    return ", ".join(f'"{f}"' if " " in f else f for f in FONTS["sans"])


def _stylesheet(options: ChartOptions) -> str:
    css = f"""
#{CHART_ID} {{ font-family: {_font_stack()}; }}
#{CHART_ID} .dot {{ cursor: pointer; transition: r 150ms ease-out; }}
#{CHART_ID} .dot:hover {{ r: {LAYOUT["dot_hover_radius"]}px; }}
#{CHART_ID} .line {{ cursor: pointer; }}
#{CHART_ID} .series, #{CHART_ID} .legend-item {{ transition: opacity 200ms; }}
#{CHART_ID} .dimmed {{ opacity: {LAYOUT["dim_opacity"]}; }}
#{CHART_ID} .series.selected .line {{ stroke-width: {LAYOUT["line_width"] + 1}; }}
#{CHART_ID} .legend-item {{ cursor: pointer; }}
#{CHART_ID} .legend-item.selected text {{ font-weight: bold; }}
"""
    if options.animate:
        css += f"""
@keyframes draw-line {{ from {{ stroke-dashoffset: 1; }} to {{ stroke-dashoffset: 0; }} }}
@keyframes fade-in {{ from {{ opacity: 0; }} to {{ opacity: 1; }} }}
#{CHART_ID} .line {{
  stroke-dasharray: 1;
  stroke-dashoffset: 1;
  animation: draw-line {LAYOUT["duration_ms"]}ms ease-out var(--delay, 0ms) forwards;
}}
#{CHART_ID} .dot {{
  opacity: 0;
  animation: fade-in 300ms ease-out calc(var(--delay, 0ms) + {LAYOUT["duration_ms"]}ms) forwards;
}}
@media (prefers-reduced-motion: reduce) {{
  #{CHART_ID} .line, #{CHART_ID} .dot {{ animation: none; stroke-dashoffset: 0; opacity: 1; }}
}}
"""
    return css


# Written without <, > or & so the text needs no escaping in XML or HTML
_SELECTION_SCRIPT = """
(function () {
  var chart = document.getElementById("%(id)s");
  if (!chart) { return; }
  var selected = null;

  function apply() {
    Array.prototype.forEach.call(chart.querySelectorAll("[data-product]"), function (el) {
      var match = el.getAttribute("data-product") === selected;
      el.classList.toggle("selected", selected !== null ? match : false);
      el.classList.toggle("dimmed", selected !== null ? !match : false);
    });
  }

  function toggle(product) {
    selected = product === selected ? null : product;
    apply();
  }

  chart.addEventListener("click", function (event) {
    var item = event.target.closest("[data-product]");
    toggle(item ? item.getAttribute("data-product") : null);
  });

  chart.addEventListener("keydown", function (event) {
    var item = event.target.closest(".legend-item");
    if (item ? (event.key === "Enter" || event.key === " ") : false) {
      event.preventDefault();
      toggle(item.getAttribute("data-product"));
    }
  });

  document.addEventListener("keydown", function (event) {
    if (event.key === "Escape") {
      selected = null;
      apply();
    }
  });
})();
"""


def _sub(parent: ET.Element, tag: str, **attrs) -> ET.Element:
    # Attribute names use "_" for "-" (stroke_width -> stroke-width)
    return ET.SubElement(
        parent, tag, {k.rstrip("_").replace("_", "-"): str(v) for k, v in attrs.items()}
    )


def _x_axis(g: ET.Element, x: BandScale, options: ChartOptions) -> None:
    tick = LAYOUT["tick_size"]
    axis = _sub(
        g, "g", class_="axis axis--x",
        transform=f"translate(0,{fmt(options.inner_height)})",
        fill="none", font_size=LAYOUT["font_size"], text_anchor="middle",
    )
    r0, r1 = x.range
    _sub(
        axis, "path", class_="domain", stroke="currentColor",
        d=f"M{fmt(r0 + _OFFSET)},{tick}V{_OFFSET}H{fmt(r1 + _OFFSET)}V{tick}",
    )
    for month in x.domain:
        t = _sub(axis, "g", class_="tick", transform=f"translate({fmt(x.center(month) + _OFFSET)},0)")
        _sub(t, "line", stroke="currentColor", y2=tick)
        label = _sub(t, "text", fill="currentColor", y=tick + LAYOUT["tick_padding"], dy="0.71em")
        label.text = month

    if options.x_label:
        label = _sub(
            axis, "text", class_="axis-label", fill=COLORS["text"],
            x=fmt(options.inner_width / 2), y=options.margin["bottom"] - 4,
            font_size=LAYOUT["label_size"],
        )
        label.text = options.x_label


def _y_axis(g: ET.Element, y: LinearScale, options: ChartOptions) -> None:
    tick = LAYOUT["tick_size"]
    axis = _sub(
        g, "g", class_="axis axis--y",
        fill="none", font_size=LAYOUT["font_size"], text_anchor="end",
    )
    r0, r1 = y.range
    _sub(
        axis, "path", class_="domain", stroke="currentColor",
        d=f"M-{tick},{fmt(r0 + _OFFSET)}H{_OFFSET}V{fmt(r1 + _OFFSET)}H-{tick}",
    )
    values = y.ticks(options.y_ticks)
    label_of = y.tick_format(options.y_ticks)
    for value in values:
        t = _sub(axis, "g", class_="tick", transform=f"translate(0,{fmt(y(value) + _OFFSET)})")
        _sub(t, "line", stroke="currentColor", x2=-tick)
        label = _sub(t, "text", fill="currentColor", x=-(tick + LAYOUT["tick_padding"]), dy="0.32em")
        label.text = label_of(value)

    if options.y_label:
        top = y(values[-1]) if values else r1
        label = _sub(
            axis, "text", class_="axis-label", fill=COLORS["text"],
            x=LAYOUT["tick_padding"], y=fmt(top + _OFFSET), dy="0.32em",
            text_anchor="start", font_weight="bold",
            font_size=LAYOUT["label_size"],
        )
        label.text = options.y_label


def _series(
    g: ET.Element,
    index: int,
    product: str,
    records: list[SaleRecord],
    color: str,
    x: BandScale,
    y: LinearScale,
    options: ChartOptions,
) -> None:
    attrs = {"class_": "series", "data_product": product}
    if options.animate:
        attrs["style"] = f"--delay: {index * LAYOUT['stagger_ms']}ms"
    group = _sub(g, "g", **attrs)

    points = [(x.center(r.month), y(r.sales)) for r in records]
    d = "M" + "L".join(f"{fmt(px)},{fmt(py)}" for px, py in points)
    # pathLength=1 lets the stylesheet animate any line with the same dash values
    _sub(
        group, "path", class_="line", d=d, stroke=color,
        stroke_width=LAYOUT["line_width"], fill="none", pathLength=1,
    )
    for record, (px, py) in zip(records, points):
        dot = _sub(
            group, "circle", class_="dot", cx=fmt(px), cy=fmt(py),
            r=LAYOUT["dot_radius"], fill=color,
        )
        _sub(dot, "title").text = tooltip(record)


def _legend(g: ET.Element, products: list[str], colors: OrdinalScale, options: ChartOptions) -> None:
    swatch = LAYOUT["legend_swatch"]
    legend = _sub(
        g, "g", class_="legend", font_size=LAYOUT["font_size"], text_anchor="end",
        transform=f"translate({fmt(options.inner_width)},0)",
    )
    for index, product in enumerate(products):
        item = _sub(
            legend, "g", class_="legend-item", data_product=product,
            transform=f"translate(0,{index * LAYOUT['legend_row']})",
            tabindex=0, role="button",
        )
        _sub(item, "rect", x=-swatch, width=swatch, height=swatch, fill=colors(index))
        label = _sub(item, "text", x=-(swatch + 6), y=fmt(swatch / 2), dy="0.32em", fill=COLORS["text"])
        label.text = product


def build_svg(dataset: SalesDataset, options: ChartOptions | None = None) -> ET.Element:
    """Assemble the chart as an ElementTree ``<svg>`` element."""
    options = options or ChartOptions()
    svg = ET.Element("svg", {
        "xmlns": SVG_NS,
        "id": CHART_ID,
        "width": str(options.width),
        "height": str(options.height),
        "viewBox": f"0 0 {options.width} {options.height}",
        "role": "img",
        "aria-labelledby": f"{CHART_ID}-title {CHART_ID}-desc",
    })
    _sub(svg, "title", id=f"{CHART_ID}-title").text = options.title or "Monthly sales by product"
    _sub(svg, "desc", id=f"{CHART_ID}-desc").text = describe(dataset)
    _sub(svg, "style").text = _stylesheet(options)
    # Clicks on empty canvas clear the selection, so give it something to hit
    _sub(svg, "rect", class_="background", width=options.width, height=options.height, fill=COLORS["bg"])

    g = _sub(svg, "g", transform=f"translate({options.margin['left']},{options.margin['top']})")

    if options.title:
        title = _sub(
            g, "text", class_="chart-title", x=fmt(options.inner_width / 2), y=-6,
            text_anchor="middle", font_size=LAYOUT["title_size"], font_weight="bold",
            fill=COLORS["text"],
        )
        title.text = options.title

    x, y = make_scales(dataset, options)
    _x_axis(g, x, options)
    _y_axis(g, y, options)

    colors = OrdinalScale(CATEGORY10)
    groups = dataset.by_product()
    for index, (product, records) in enumerate(groups.items()):
        _series(g, index, product, records, colors(index), x, y, options)

    _legend(g, list(groups), colors, options)
    _sub(svg, "script").text = _SELECTION_SCRIPT % {"id": CHART_ID}
    return svg


def render_svg(dataset: SalesDataset, options: ChartOptions | None = None) -> str:
    svg = build_svg(dataset, options)
    ET.indent(svg)
    return ET.tostring(svg, encoding="unicode")


def write_svg(
    dataset: SalesDataset,
    path: str | Path,
    options: ChartOptions | None = None,
) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_svg(dataset, options) + "\n", encoding="utf-8")
    logger.debug("wrote %s", path)
    return path
