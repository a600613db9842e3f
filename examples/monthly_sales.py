"""Example: interactive page plus a static PNG from the bundled dataset."""

from pathlib import Path

import sales_graph as sg

DATA = Path(__file__).resolve().parents[1] / "data" / "d3_data.json"

dataset = sg.load_sales(DATA)
options = sg.ChartOptions(title="Monthly Sales by Product")

sg.write_page(dataset, "build", options)
sg.sales_chart(dataset, options=options, filename="monthly-sales.png", output_dir="build")
