import io
import json

import pytest

from sales_graph.data import DatasetError, SaleRecord, SalesDataset, load_sales

from conftest import make_record


def test_load_sales_from_path(data_file):
    dataset = load_sales(data_file)
    assert len(dataset) == 9
    assert dataset.records[0] == SaleRecord("Widget", "Jan", 42.0, 12.5)


def test_load_sales_from_open_file(records):
    dataset = load_sales(io.StringIO(json.dumps({"Sales": records})))
    assert dataset.products() == ["Widget", "Gadget", "Gizmo"]


def test_months_keep_first_appearance_order():
    dataset = SalesDataset.from_records([
        make_record("A", "Mar", 1, 0),
        make_record("A", "Jan", 2, 0),
        make_record("B", "Mar", 3, 0),
        make_record("B", "Feb", 4, 0),
    ])
    assert dataset.months() == ["Mar", "Jan", "Feb"]


def test_by_product_groups_in_record_order(dataset):
    groups = dataset.by_product()
    assert list(groups) == ["Widget", "Gadget", "Gizmo"]
    assert [r.month for r in groups["Gadget"]] == ["Jan", "Feb", "Mar"]
    assert [r.sales for r in groups["Gizmo"]] == [20, 27, 31]


def test_interleaved_products_still_group():
    dataset = SalesDataset.from_records([
        make_record("A", "Jan", 1, 0),
        make_record("B", "Jan", 2, 0),
        make_record("A", "Feb", 3, 0),
    ])
    groups = dataset.by_product()
    assert [r.sales for r in groups["A"]] == [1, 3]
    assert [r.sales for r in groups["B"]] == [2]


def test_max_sales_and_peak(dataset):
    assert dataset.max_sales() == 120
    peak = dataset.peak()
    assert (peak.product, peak.month) == ("Gadget", "Mar")


def test_empty_dataset_is_valid():
    dataset = load_sales(io.StringIO('{"Sales": []}'))
    assert len(dataset) == 0
    assert dataset.months() == []
    assert dataset.max_sales() == 0
    assert dataset.peak() is None


def test_months_and_products_are_strings():
    dataset = SalesDataset.from_records([make_record(7, 2024, 1, 0)])
    assert dataset.records[0].product == "7"
    assert dataset.months() == ["2024"]


@pytest.mark.parametrize(
    "text, message",
    [
        ("{not json", "invalid JSON"),
        ("[]", "'Sales' list"),
        ('{"sales": []}', "'Sales' list"),
        ('{"Sales": {}}', "'Sales' list"),
        ('{"Sales": [1]}', "record 0: expected an object"),
    ],
)
def test_load_sales_rejects_malformed_documents(text, message):
    with pytest.raises(DatasetError, match=message):
        load_sales(io.StringIO(text))


def test_missing_field_names_the_record():
    bad = make_record("A", "Jan", 1, 0)
    del bad["Gross Profit (k)"]
    with pytest.raises(DatasetError, match=r"record 1: missing fields \['Gross Profit \(k\)'\]"):
        SalesDataset.from_records([make_record("A", "Jan", 1, 0), bad])


@pytest.mark.parametrize("value", ["42", None, True, [1]])
def test_non_numeric_sales_rejected(value):
    with pytest.raises(DatasetError, match="must be a number"):
        SalesDataset.from_records([make_record("A", "Jan", value, 0)])


def test_non_finite_values_rejected():
    # json accepts NaN/Infinity literals
    with pytest.raises(DatasetError, match="must be finite"):
        load_sales(io.StringIO(
            '{"Sales": [{"Product Name": "A", "Month": "Jan", '
            '"Sales Amount (k)": NaN, "Gross Profit (k)": 1}]}'
        ))


def test_dataset_error_is_a_value_error():
    assert issubclass(DatasetError, ValueError)


def test_missing_file_raises_os_error(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_sales(tmp_path / "nope.json")


def test_file_that_is_not_utf8_is_a_dataset_error(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"Sales": [\xff]}')
    with pytest.raises(DatasetError, match="invalid JSON"):
        load_sales(path)


def test_integer_too_large_for_float_names_the_record():
    huge = 10 ** 400
    with pytest.raises(DatasetError, match="record 1: 'Sales Amount \\(k\\)' is too large"):
        SalesDataset.from_records([make_record("A", "Jan", 1, 0), make_record("A", "Feb", huge, 0)])
