import json

import matplotlib

matplotlib.use("Agg")

import pytest  # noqa: E402

from sales_graph import SalesDataset  # noqa: E402

SALES = "Sales Amount (k)"
GROSS = "Gross Profit (k)"
MONTH = "Month"
PRODUCT = "Product Name"


def make_record(product: str, month: str, sales: float, gross: float) -> dict:
    return {PRODUCT: product, MONTH: month, SALES: sales, GROSS: gross}


@pytest.fixture
def records() -> list[dict]:
    """Three products over three months; Gadget holds the peak."""
    return [
        make_record("Widget", "Jan", 42, 12.5),
        make_record("Widget", "Feb", 51, 15),
        make_record("Widget", "Mar", 63, 19.2),
        make_record("Gadget", "Jan", 95, 30),
        make_record("Gadget", "Feb", 88, 26.3),
        make_record("Gadget", "Mar", 120, 40.5),
        make_record("Gizmo", "Jan", 20, 4),
        make_record("Gizmo", "Feb", 27, 6.6),
        make_record("Gizmo", "Mar", 31, 8),
    ]


@pytest.fixture
def dataset(records) -> SalesDataset:
    return SalesDataset.from_records(records)


@pytest.fixture
def data_file(tmp_path, records):
    path = tmp_path / "d3_data.json"
    path.write_text(json.dumps({"Sales": records}), encoding="utf-8")
    return path
