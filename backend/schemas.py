from typing import Any, List
from pydantic import BaseModel, ConfigDict

class DashboardResponse(BaseModel):
    metrics: List[Any] = []
    transactions: List[Any] = []

    # The seed file may carry extra top-level keys; pass them through
    model_config = ConfigDict(extra="allow")

class HealthResponse(BaseModel):
    ok: bool
    uptime: float
