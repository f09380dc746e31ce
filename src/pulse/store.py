"""
ROLE: Transaction Store
RESPONSIBILITIES:
1.  Holds the authoritative list of transactions for the session (live or demo).
2.  Keeps only the most recent MAX_TRANSACTIONS records.
3.  Produces the filtered view, always recomputed from the full list.
4.  Owns the lock every writer (session load, feed tick) must hold.
"""
import logging
import threading
from collections import deque
from typing import Iterable, List, Optional

from pulse.config import INITIAL_LAST_ID, MAX_TRANSACTIONS
from pulse.models import Mode, Transaction
from pulse.search import filter_transactions

logger = logging.getLogger("Store")


class TransactionStore:
    def __init__(self, max_size: int = MAX_TRANSACTIONS, last_id: int = INITIAL_LAST_ID):
        self.max_size = max_size
        self.last_id = last_id
        self.mode = Mode.DEMO
        self.query = ""
        self.lock = threading.RLock()
        self._transactions: deque = deque(maxlen=max_size)
        self._filtered: List[Transaction] = []

    # ==========================================================================
    # READS
    # ==========================================================================
    @property
    def transactions(self) -> List[Transaction]:
        with self.lock:
            return list(self._transactions)

    @property
    def filtered(self) -> List[Transaction]:
        with self.lock:
            return list(self._filtered)

    @property
    def is_live(self) -> bool:
        return self.mode == Mode.LIVE

    def __len__(self) -> int:
        with self.lock:
            return len(self._transactions)

    # ==========================================================================
    # WRITES
    # ==========================================================================
    def initialize(self, transactions: Iterable[Transaction], mode: Mode = Mode.DEMO) -> None:
        """Replaces the contents wholesale and clears any active filter."""
        with self.lock:
            # deque(maxlen) keeps the tail when the snapshot is oversized
            self._transactions = deque(transactions, maxlen=self.max_size)
            self.mode = Mode(mode)
            self.query = ""
            self._filtered = list(self._transactions)
            logger.info(f"📦 Store initialized with {len(self._transactions)} transactions ({self.mode.value})")

    def append(self, tx: Transaction) -> bool:
        """Adds a transaction at the end and re-applies the current query. Refused outside live mode."""
        with self.lock:
            if self.mode != Mode.LIVE:
                logger.debug(f"Append of {tx.id} refused in {self.mode.value} mode")
                return False
            self._transactions.append(tx)
            # Eviction may have dropped a filtered entry
            self._filtered = filter_transactions(self._transactions, self.query)
            return True

    def set_filter(self, query: Optional[str]) -> List[Transaction]:
        with self.lock:
            self.query = query or ""
            self._filtered = filter_transactions(self._transactions, self.query)
            return list(self._filtered)

    def demote(self) -> None:
        """Drops to demo mode, keeping the current data."""
        with self.lock:
            if self.mode != Mode.DEMO:
                logger.warning("⚠️ Store demoted to demo mode")
            self.mode = Mode.DEMO

    def next_id(self) -> str:
        with self.lock:
            self.last_id += 1
            return f"txn_{self.last_id}"
