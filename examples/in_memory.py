"""Example: build a dataset in code and render only the SVG."""

import sales_graph as sg

dataset = sg.SalesDataset.from_records(
    {
        sg.FIELDS["product"]: product,
        sg.FIELDS["month"]: month,
        sg.FIELDS["sales"]: sales,
        sg.FIELDS["gross"]: sales * 0.3,
    }
    for product, base in [("North", 40), ("South", 65)]
    for month, sales in zip(["Q1", "Q2", "Q3", "Q4"], range(base, base + 40, 10))
)

sg.write_svg(dataset, "build/regions.svg", sg.ChartOptions(animate=False, title="Regional Sales"))
