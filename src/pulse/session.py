"""
ROLE: Dashboard Session
RESPONSIBILITIES:
1.  Owns the whole client state (store, metrics, connectivity, feed).
2.  Runs the initial (or a manual re-) load and switches live/demo mode.
3.  Re-renders after every state change: load, search, feed tick.
"""
import logging
import weakref
from typing import Callable, List, Optional, Tuple

from pulse.config import FEED_INTERVAL
from pulse.data_source import INDICATOR_DEMO, DataSourceAdapter, LoadResult
from pulse.feed import SyntheticFeedGenerator
from pulse.models import Metric, Mode, Transaction
from pulse.projection import DashboardView, project
from pulse.store import TransactionStore

logger = logging.getLogger("Session")


class DashboardSession:
    def __init__(
        self,
        adapter: Optional[DataSourceAdapter] = None,
        store: Optional[TransactionStore] = None,
        feed_interval: float = FEED_INTERVAL,
        on_render: Optional[Callable[[DashboardView], None]] = None,
        feed: Optional[SyntheticFeedGenerator] = None,
    ):
        self.adapter = adapter or DataSourceAdapter()
        self.store = store or TransactionStore()
        self.feed = feed or SyntheticFeedGenerator(self.store, interval=feed_interval)
        self.feed.on_tick = _weak_tick(self)
        self.on_render = on_render

        # The feed thread only holds the session weakly; once the owner (e.g. a closed
        # browser tab) drops it, the timer is stopped
        self._finalizer = weakref.finalize(self, self.feed.stop)

        self.metrics: List[Metric] = []
        self.status_text = "Loading..."
        self.indicator: Tuple[str, str] = INDICATOR_DEMO
        self.last_result: Optional[LoadResult] = None

    @property
    def mode(self) -> Mode:
        return self.store.mode

    @property
    def api_online(self) -> bool:
        return self.store.mode == Mode.LIVE

    # ==========================================================================
    # EVENTS
    # ==========================================================================
    def load(self) -> LoadResult:
        # Network IO stays outside the lock so feed ticks are not blocked by a slow backend
        result = self.adapter.load()
        if not result.api_online:
            self.feed.stop()

        with self.store.lock:
            self.store.initialize(result.snapshot.transactions, result.mode)
            self.metrics = list(result.snapshot.metrics)
            self.status_text = result.status_text
            self.indicator = result.indicator
            self.last_result = result
            if result.api_online:
                self.feed.start()

        logger.info(f"✅ Loaded snapshot in {result.mode.value} mode: {result.status_text}")
        self.render()
        return result

    def set_query(self, query: Optional[str]) -> None:
        query = query or ""
        if query == self.store.query:
            return
        self.store.set_filter(query)
        self.render()

    def close(self) -> None:
        self.feed.stop()

    def _on_feed_tick(self, tx: Transaction) -> None:
        self.render()

    # ==========================================================================
    # VIEW
    # ==========================================================================
    def view(self) -> DashboardView:
        with self.store.lock:
            return project(
                metrics=self.metrics,
                transactions=self.store.transactions,
                filtered=self.store.filtered,
                indicator=self.indicator,
                status_text=self.status_text,
            )

    def render(self) -> None:
        if self.on_render is None:
            return
        self.on_render(self.view())


def _weak_tick(session: DashboardSession) -> Callable[[Transaction], None]:
    ref = weakref.WeakMethod(session._on_feed_tick)

    def notify(tx: Transaction) -> None:
        method = ref()
        if method is not None:
            method(tx)

    return notify
