import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "dashboard"))

from pulse.aggregation import Bucket
from pulse.projection import DashboardView, TableRow
from views.overview import build_sales_chart, build_table


def make_view(chart=None, rows=None):
    return DashboardView(
        indicator=("● LIVE", "#2ecc71"),
        status_text="API connected",
        rows=rows or [],
        chart=chart or [],
    )


def test_sales_chart_uses_bucket_order():
    view = make_view(chart=[Bucket("11:30", 4.0), Bucket("09:15", 2.0)])
    fig = build_sales_chart(view)

    trace = fig.data[0]
    assert list(trace.x) == ["11:30", "09:15"]
    assert list(trace.y) == [4.0, 2.0]
    assert trace.name == "Sales USD"
    assert trace.fill == "tozeroy"
    assert trace.line.color == "#610000"

def test_table_columns_and_order():
    rows = [
        TableRow(id="txn_102", product="SSD 1TB", date="01/01/2024, 10:01:00", amount="$9.00"),
        TableRow(id="txn_101", product="RAM DDR4", date="01/01/2024, 10:00:00", amount="$5.50"),
    ]
    df = build_table(make_view(rows=rows))
    assert list(df.columns) == ["ID", "Product", "Date", "Amount"]
    assert df["ID"].tolist() == ["txn_102", "txn_101"]

def test_empty_table_keeps_headers():
    df = build_table(make_view())
    assert df.empty
    assert list(df.columns) == ["ID", "Product", "Date", "Amount"]

def test_sales_chart_layout():
    fig = build_sales_chart(make_view(chart=[Bucket("10:00", 1.0)]))
    assert fig.layout.title.text == "Sales per minute"
    assert fig.layout.height == 350
    assert fig.layout.yaxis.rangemode == "tozero"
    assert fig.layout.xaxis.nticks == 8
