"""
ROLE: Data Source Adapter
RESPONSIBILITIES:
1.  Fetches the dashboard snapshot from the backend over HTTP.
2.  Falls back to the local demo snapshot when the backend fails in any way.
3.  Reports connectivity (live/demo) and a user-facing status text.
4.  Never raises: every failure ends up as a demo-mode LoadResult.
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Tuple

import requests

from pulse.config import BACKEND_URL, DASHBOARD_ENDPOINT, REQUEST_TIMEOUT, resolve_fallback_path
from pulse.errors import DataSourceError, FallbackFailure, ParseFailure, TransportFailure
from pulse.models import Mode, Snapshot

logger = logging.getLogger("DataSource")

STATUS_LIVE = "API connected"
STATUS_DEMO = "Demo mode active"
STATUS_NO_DATA = "Could not load demo data"

INDICATOR_LIVE = ("● LIVE", "#2ecc71")
INDICATOR_DEMO = ("● DEMO MODE", "#e74c3c")


@dataclass(frozen=True)
class LoadResult:
    snapshot: Snapshot
    mode: Mode
    status_text: str
    error: Optional[DataSourceError] = None

    @property
    def api_online(self) -> bool:
        return self.mode == Mode.LIVE

    @property
    def indicator(self) -> Tuple[str, str]:
        """(label, colour) for the connectivity badge."""
        return INDICATOR_LIVE if self.api_online else INDICATOR_DEMO


class DataSourceAdapter:
    """Loads snapshots from the backend, with the demo file as a safety net."""

    def __init__(
        self,
        base_url: str = BACKEND_URL,
        endpoint: str = DASHBOARD_ENDPOINT,
        fallback_path: Optional[Path] = None,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip('/')
        self.endpoint = endpoint
        self.fallback_path = resolve_fallback_path(fallback_path)
        self.timeout = timeout
        self.session = session or requests.Session()
        logger.info(f"🔌 Data source pointing to: {self.url} (fallback: {self.fallback_path})")

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.endpoint}"

    # ==========================================================================
    # PUBLIC
    # ==========================================================================
    def load(self) -> LoadResult:
        try:
            snapshot = Snapshot.from_payload(self.fetch_live())
            return LoadResult(snapshot=snapshot, mode=Mode.LIVE, status_text=STATUS_LIVE)
        except DataSourceError as e:
            logger.warning(f"⚠️ API unavailable, switching to demo mode: {e}")

        try:
            snapshot = Snapshot.from_payload(self.fetch_fallback())
            return LoadResult(snapshot=snapshot, mode=Mode.DEMO, status_text=STATUS_DEMO)
        except FallbackFailure as e:
            logger.error(f"❌ Could not load demo snapshot: {e}")
            return LoadResult(snapshot=Snapshot.empty(), mode=Mode.DEMO,
                              status_text=STATUS_NO_DATA, error=e)

    # ==========================================================================
    # SOURCES
    # ==========================================================================
    def fetch_live(self) -> Any:
        """GETs the live endpoint. Raises TransportFailure or ParseFailure."""
        try:
            response = self.session.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.ConnectionError as e:
            raise TransportFailure(f"Could not reach {self.url}") from e
        except requests.exceptions.Timeout as e:
            raise TransportFailure(f"Backend did not respond in {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise TransportFailure(f"Request to {self.url} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise ParseFailure(f"Malformed JSON from {self.url}") from e

    def fetch_fallback(self) -> Any:
        """Reads the demo snapshot from disk. Raises FallbackFailure."""
        try:
            with open(self.fallback_path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise FallbackFailure(f"{self.fallback_path}: {e}") from e
