import matplotlib.pyplot as plt
import pytest

from sales_graph.charts import figure, sales_chart, save
from sales_graph.data import SalesDataset
from sales_graph.render import ChartOptions
from sales_graph.theme import CATEGORY10


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


def test_figure_applies_style():
    fig, ax = figure()
    assert tuple(fig.get_size_inches()) == pytest.approx((9.6, 4.0))
    assert not ax.spines["top"].get_visible()


def test_sales_chart_draws_one_line_per_product(dataset):
    fig, ax = sales_chart(dataset)
    lines = ax.get_lines()
    assert len(lines) == 3
    assert [line.get_label() for line in lines] == ["Widget", "Gadget", "Gizmo"]
    assert [line.get_color() for line in lines] == CATEGORY10[:3]
    assert list(lines[0].get_xdata()) == [160.5, 450.5, 740.5]
    assert list(lines[1].get_ydata()) == [95, 88, 120]


def test_sales_chart_axes_match_interactive_scales(dataset):
    fig, ax = sales_chart(dataset)
    assert [t.get_text() for t in ax.get_xticklabels()] == ["Jan", "Feb", "Mar"]
    assert list(ax.get_yticks()) == [0, 20, 40, 60, 80, 100, 120]
    assert ax.get_xlim() == (0, 900)
    assert ax.get_xlabel() == "Month"
    assert ax.get_ylabel() == "Sales Amount (k)"
    legend = ax.get_legend()
    assert [t.get_text() for t in legend.get_texts()] == ["Widget", "Gadget", "Gizmo"]


def test_sales_chart_title(dataset):
    fig, ax = sales_chart(dataset, options=ChartOptions(title="Monthly"))
    assert ax.get_title() == "Monthly"


def test_sales_chart_empty_dataset():
    fig, ax = sales_chart(SalesDataset([]))
    assert ax.get_lines() == []
    assert ax.get_legend() is None


@pytest.mark.parametrize("filename", ["sales.svg", "sales.png"])
def test_sales_chart_saves_file(tmp_path, dataset, filename):
    sales_chart(dataset, filename=filename, output_dir=tmp_path)
    assert (tmp_path / filename).stat().st_size > 0


def test_save_creates_directory(tmp_path):
    fig, ax = figure()
    path = save(fig, "blank.png", tmp_path / "nested")
    assert path == tmp_path / "nested" / "blank.png"
    assert path.exists()


def test_save_closes_figure_when_savefig_fails(tmp_path):
    fig, ax = figure()
    with pytest.raises(ValueError):
        save(fig, "chart.xyz", tmp_path)
    assert not plt.fignum_exists(fig.number)


def test_sales_chart_accepts_marker_override(dataset):
    fig, ax = sales_chart(dataset, marker="s")
    assert all(line.get_marker() == "s" for line in ax.get_lines())


def test_sales_chart_default_marker(dataset):
    fig, ax = sales_chart(dataset)
    assert ax.get_lines()[0].get_marker() == "o"
