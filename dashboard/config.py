import os
from dataclasses import dataclass
from typing import Final

# ==============================================================================
# 1. SYSTEM
# ==============================================================================
ENVIRONMENT: Final = os.getenv("ENVIRONMENT", "development").lower()
PAGE_TITLE: Final = "Pulse Sales Dashboard"

# Quick validation
if ENVIRONMENT not in {"development", "staging", "production"}:
    raise ValueError(f"Invalid ENVIRONMENT: {ENVIRONMENT}")

# ==============================================================================
# 2. UI & PERFORMANCE SETTINGS
# ==============================================================================
@dataclass(frozen=True)
class UIConfig:
    """Dashboard UI configuration."""
    # Refresh logic (how often the page re-reads the session state)
    DEFAULT_REFRESH_RATE: int = int(os.getenv("UI_REFRESH_RATE", "5"))
    REFRESH_OPTIONS = [2, 5, 10, 30, 60]

    # Chart defaults
    CHART_HEIGHT: int = 350
    CHART_LINE_COLOR: str = "#610000"
    CHART_FILL_COLOR: str = "rgba(97,0,0,0.10)"
    CHART_SERIES_NAME: str = "Sales USD"
    CHART_MAX_TICKS: int = 8

# ==============================================================================
# 3. PAGE REGIONS
# ==============================================================================
class DashboardModules:
    """Regions drawn on the page. A disabled region is skipped silently."""
    ENABLED_MODULES = {
        "metric_cards": os.getenv("SHOW_METRIC_CARDS", "true").lower() == "true",
        "transactions_table": os.getenv("SHOW_TRANSACTIONS_TABLE", "true").lower() == "true",
        "sales_chart": os.getenv("SHOW_SALES_CHART", "true").lower() == "true",
    }
