"""
Session wiring and the pure view projection.
"""
import gc
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from pulse.aggregation import Bucket
from pulse.data_source import LoadResult, STATUS_DEMO, STATUS_LIVE
from pulse.models import Metric, Mode, Snapshot, Transaction
from pulse.projection import format_amount, format_date, project_cards, project_rows
from pulse.session import DashboardSession


def tx(i, product="SSD 1TB", minute=0, amount=10.0):
    return Transaction(id=f"tx_{i}", product=product, date=f"2024-01-01T10:{minute:02d}:00", amount=amount)


class FakeAdapter:
    """Returns queued LoadResults in order."""

    def __init__(self, *results):
        self.results = list(results)

    def load(self):
        return self.results.pop(0)


def live_result(transactions, metrics=()):
    return LoadResult(Snapshot(metrics=list(metrics), transactions=list(transactions)), Mode.LIVE, STATUS_LIVE)


def demo_result(transactions, metrics=()):
    return LoadResult(Snapshot(metrics=list(metrics), transactions=list(transactions)), Mode.DEMO, STATUS_DEMO)


@pytest.fixture
def renders():
    return []


def make_session(renders, *results):
    return DashboardSession(adapter=FakeAdapter(*results), feed_interval=60, on_render=renders.append)


# ==============================================================================
# SESSION
# ==============================================================================
class TestDashboardSession:
    def test_live_load_starts_feed(self, renders):
        session = make_session(renders, live_result([tx(1)]))
        try:
            session.load()
            assert session.mode == Mode.LIVE
            assert session.api_online is True
            assert session.feed.running is True
            assert len(renders) == 1
            assert renders[0].indicator == ("● LIVE", "#2ecc71")
        finally:
            session.close()
        assert session.feed.running is False

    def test_demo_scenario_never_appends(self, renders):
        snapshot = [Transaction(id="1", product="P", date="2024-01-01T00:00:00Z", amount=10)]
        session = make_session(renders, demo_result(snapshot, [Metric(title="X", value=1)]))
        session.load()

        assert session.mode == Mode.DEMO
        assert session.feed.running is False
        assert session.feed.tick() is None
        assert session.store.transactions == snapshot
        assert renders[-1].status_text == STATUS_DEMO

    def test_reload_demotes_live_to_demo(self, renders):
        session = make_session(renders, live_result([tx(1)]), demo_result([tx(2), tx(3)]))
        try:
            session.load()
            session.load()
            assert session.mode == Mode.DEMO
            assert session.feed.running is False
            assert [t.id for t in session.store.transactions] == ["tx_2", "tx_3"]
        finally:
            session.close()

    def test_feed_tick_renders(self, renders):
        session = make_session(renders, live_result([]))
        try:
            session.load()
            session.feed.tick()
            assert len(renders) == 2
            assert renders[-1].rows[0].id == "txn_101"
        finally:
            session.close()

    def test_set_query_filters_view(self, renders):
        session = make_session(renders, demo_result([tx(1, "Mouse Pro"), tx(2, "SSD 1TB")]))
        session.load()
        session.set_query("  mouse ")

        assert [r.id for r in renders[-1].rows] == ["tx_1"]
        count = len(renders)
        session.set_query("  mouse ")
        assert len(renders) == count

    def test_chart_falls_back_when_nothing_matches(self, renders):
        session = make_session(renders, demo_result([tx(1, minute=5, amount=4)]))
        session.load()
        session.set_query("zzz")

        view = session.view()
        assert view.rows == []
        assert view.chart == [Bucket("10:05", 4.0)]

    def test_dropping_session_stops_feed_thread(self, renders):
        session = make_session(renders, live_result([tx(1)]))
        session.load()
        feed = session.feed
        thread = feed._thread
        assert thread.is_alive()

        del session
        gc.collect()

        thread.join(timeout=2)
        assert not thread.is_alive()
        assert feed.running is False

    def test_close_then_reload_restarts_feed(self, renders):
        session = make_session(renders, live_result([tx(1)]), live_result([tx(2)]))
        try:
            session.load()
            session.close()
            assert session.feed.running is False
            session.load()
            assert session.feed.running is True
        finally:
            session.close()


# ==============================================================================
# PROJECTION
# ==============================================================================
class TestProjection:
    def test_table_shows_seven_most_recent_first(self):
        rows = project_rows([tx(i) for i in range(10)])
        assert [r.id for r in rows] == ["tx_9", "tx_8", "tx_7", "tx_6", "tx_5", "tx_4", "tx_3"]

    def test_cards_render_missing_fields_as_empty(self):
        cards = project_cards([Metric(title="Orders", value=37), Metric()])
        assert cards[0].title == "Orders"
        assert cards[0].value == "37"
        assert cards[1].title == ""
        assert cards[1].value == ""

    def test_amount_format(self):
        assert format_amount(10) == "$10.00"
        assert format_amount(32.5) == "$32.50"

    def test_date_format(self):
        assert format_date("2024-03-05T14:07:09") == "05/03/2024, 14:07:09"
        assert format_date("yesterday-ish") == "yesterday-ish"
