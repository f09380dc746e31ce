"""
ROLE: Synthetic Feed Generator
RESPONSIBILITIES:
1.  While the backend is live, synthesizes a new sale every FEED_INTERVAL seconds.
2.  Appends it to the store and re-applies the current search query.
3.  Guarantees a single timer per generator, and no tick after stop().
"""
import logging
import random
import threading
from datetime import datetime, timezone
from typing import Callable, List, Optional

from pulse.config import AMOUNT_RANGE, FEED_INTERVAL, PRODUCT_CATALOG
from pulse.models import Transaction
from pulse.store import TransactionStore

logger = logging.getLogger("Feed")


class SyntheticFeedGenerator:
    """
    Recurring timer driven by a daemon thread that waits on a cancellation event.
    Each start() arms a fresh event; stop() sets it while holding the store lock,
    so a tick either completes before stop() returns or never mutates the store.
    """

    def __init__(
        self,
        store: TransactionStore,
        interval: float = FEED_INTERVAL,
        on_tick: Optional[Callable[[Transaction], None]] = None,
        rng: Optional[random.Random] = None,
        catalog: Optional[List[str]] = None,
    ):
        self.store = store
        self.interval = interval
        self.on_tick = on_tick
        self.rng = rng or random.Random()
        self.catalog = list(catalog or PRODUCT_CATALOG)
        self._handle: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._handle is not None and not self._handle.is_set()

    # ==========================================================================
    # TIMER LIFECYCLE
    # ==========================================================================
    def start(self) -> None:
        with self.store.lock:
            if self.running:
                return
            handle = threading.Event()
            self._handle = handle
            self._thread = threading.Thread(
                target=self._run, args=(handle,), name="pulse-feed", daemon=True
            )
            self._thread.start()
        logger.info(f"▶️ Synthetic feed started (every {self.interval}s)")

    def stop(self) -> None:
        with self.store.lock:
            if self._handle is None:
                return
            self._handle.set()
            thread = self._thread
            self._handle = None
            self._thread = None

        # Joined outside the lock: a tick in progress may be waiting on it
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=1.0)
        logger.info("🛑 Synthetic feed stopped")

    def _run(self, handle: threading.Event) -> None:
        while not handle.wait(self.interval):
            try:
                self._tick(handle)
            except Exception as e:
                logger.error(f"❌ Feed tick failed: {e}")

    # ==========================================================================
    # TICK
    # ==========================================================================
    def synthesize(self) -> Transaction:
        low, high = AMOUNT_RANGE
        amount = min(round(low + self.rng.random() * (high - low), 2), high - 0.01)
        return Transaction(
            id=self.store.next_id(),
            product=self.rng.choice(self.catalog),
            date=datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            amount=amount,
        )

    def tick(self) -> Optional[Transaction]:
        """Runs one feed step immediately. Returns the appended transaction, if any."""
        return self._tick(None)

    def _tick(self, handle: Optional[threading.Event]) -> Optional[Transaction]:
        with self.store.lock:
            if handle is not None and handle.is_set():
                return None
            if not self.store.is_live:
                return None

            tx = self.synthesize()
            if not self.store.append(tx):
                return None

        logger.debug(f"📤 Synthetic tx: {tx.id} | ${tx.amount:.2f}")
        if self.on_tick:
            self.on_tick(tx)
        return tx
