"""sales-graph — interactive line chart of monthly sales per product."""

from .charts import figure, sales_chart, save
from .data import DatasetError, SaleRecord, SalesDataset, load_sales
from .page import render_page, write_page
from .render import ChartOptions, describe, render_svg, write_svg
from .scales import BandScale, LinearScale, OrdinalScale
from .theme import CATEGORY10, COLORS, FIELDS, FONTS, LAYOUT

__all__ = [
    "BandScale",
    "ChartOptions",
    "DatasetError",
    "LinearScale",
    "OrdinalScale",
    "SaleRecord",
    "SalesDataset",
    "describe",
    "figure",
    "load_sales",
    "render_page",
    "render_svg",
    "sales_chart",
    "save",
    "write_page",
    "write_svg",
    "CATEGORY10",
    "COLORS",
    "FIELDS",
    "FONTS",
    "LAYOUT",
]
