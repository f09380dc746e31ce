import os
from pathlib import Path
from typing import Final, List

# ==============================================================================
# 1. CONNECTION
# ==============================================================================
BACKEND_URL: Final = os.getenv("BACKEND_URL", "http://localhost:3000").rstrip('/')
DASHBOARD_ENDPOINT: Final = os.getenv("DASHBOARD_ENDPOINT", "/dashboard")
REQUEST_TIMEOUT: Final = float(os.getenv("REQUEST_TIMEOUT", "3.0"))

# Demo snapshot, resolved against the dashboard directory when relative
DASHBOARD_DIR: Final = Path(__file__).resolve().parents[2] / "dashboard"
FALLBACK_PATH: Final = os.getenv("FALLBACK_PATH", "static/data.json")

# ==============================================================================
# 2. STATE ENGINE LIMITS
# ==============================================================================
MAX_TRANSACTIONS: Final = int(os.getenv("MAX_TRANSACTIONS", "500"))
CHART_WINDOW: Final = 50
TABLE_ROWS: Final = 7

# ==============================================================================
# 3. SYNTHETIC FEED
# ==============================================================================
FEED_INTERVAL: Final = float(os.getenv("FEED_INTERVAL", "5.0"))  # Seconds
INITIAL_LAST_ID: Final = 100
PRODUCT_CATALOG: Final[List[str]] = ["RAM DDR4", "SSD 1TB", "Mouse Pro", "Monitor 24'"]
AMOUNT_RANGE: Final = (20.0, 170.0)

if FEED_INTERVAL <= 0:
    raise ValueError(f"Invalid FEED_INTERVAL: {FEED_INTERVAL}")


def resolve_fallback_path(path=None) -> Path:
    """Absolute location of the demo snapshot."""
    candidate = Path(path or FALLBACK_PATH)
    if candidate.is_absolute():
        return candidate
    return DASHBOARD_DIR / candidate
