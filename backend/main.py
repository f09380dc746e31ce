"""
ROLE: The Gateway (API)
RESPONSIBILITIES:
1. Serves the dashboard snapshot (/dashboard) read from the seed file.
2. Serves the static dashboard assets (demo snapshot) under /static.
3. Exposes a health check with process uptime.
4. Answers unknown routes and unhandled errors with generic bodies.
"""
import os
import sys
import json
import logging
import time
from datetime import datetime
from pathlib import Path
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

sys.path.append(os.path.dirname(__file__))

from schemas import DashboardResponse, HealthResponse

# ==============================================================================
# 1. CONFIGURATION
# ==============================================================================
BACKEND_DIR = Path(__file__).resolve().parent
PORT = int(os.getenv('PORT', '3000'))
SEED_PATH = Path(os.getenv('SEED_PATH', BACKEND_DIR / "seed.json"))
STATIC_DIR = Path(os.getenv('STATIC_DIR', BACKEND_DIR.parent / "dashboard" / "static"))
ALLOWED_ORIGINS = os.getenv('ALLOWED_ORIGINS', '*').split(',')

GENERIC_ERROR = {"error": "Internal server error"}
NOT_FOUND_ERROR = {"error": "Route not found"}
NOT_FOUND_PAGE = """
<html><body style="font-family:system-ui;padding:24px">
  <h1>404</h1><p>Route not found</p>
</body></html>
"""

# ==============================================================================
# 2. STRUCTURED LOGGING
# ==============================================================================
class JsonFormatter(logging.Formatter):
    def format(self, record):
        return json.dumps({
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "service": "pulse-gateway"
        })
handler = logging.StreamHandler()
handler.setFormatter(JsonFormatter())
logging.basicConfig(level=logging.INFO, handlers=[handler])
logger = logging.getLogger("Gateway")

# ==============================================================================
# 3. SEED LOADING
# ==============================================================================
def read_seed(path: Path = None) -> dict:
    """Reads the seed file and normalizes metrics/transactions to lists."""
    raw = (path or SEED_PATH).read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        data = {}

    data["metrics"] = data["metrics"] if isinstance(data.get("metrics"), list) else []
    data["transactions"] = data["transactions"] if isinstance(data.get("transactions"), list) else []
    return data

# ==============================================================================
# 4. LIFECYCLE MANAGEMENT
# ==============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    # ----Startup----------
    logger.info(f"🚀 Gateway starting on port {PORT} (seed: {SEED_PATH})")
    if not SEED_PATH.exists():
        logger.warning(f"⚠️ Seed file {SEED_PATH} not found. /dashboard will answer 500.")

    yield

    # ----Shutdown----------
    logger.info("🛑 Gateway shutting down...")

# ==============================================================================
# 5. APP & ENDPOINTS
# ==============================================================================
app = FastAPI(title="Pulse Gateway", version="1.0.0", lifespan=lifespan)
app.state.startup_time = time.time()

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=STATIC_DIR, check_dir=False), name="static")

@app.get("/", tags=["System"])
def root():
    return {"service": "Pulse Gateway", "status": "active"}

@app.get("/health", response_model=HealthResponse, tags=["System"])
def health():
    return {"ok": True, "uptime": round(time.time() - app.state.startup_time, 3)}

@app.get("/dashboard", response_model=DashboardResponse, tags=["Dashboard"])
def get_dashboard():
    try:
        return read_seed(SEED_PATH)
    except (OSError, ValueError) as e:
        logger.error(f"Seed read error: {e}")
        return JSONResponse(status_code=500, content=GENERIC_ERROR)

# ==============================================================================
# 6. ERROR HANDLERS
# ==============================================================================
def _accepts_html(request: Request) -> bool:
    accept = request.headers.get("accept", "*/*")
    return any(t in accept for t in ("text/html", "text/*", "*/*"))

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        if _accepts_html(request):
            return HTMLResponse(NOT_FOUND_PAGE, status_code=404)
        return JSONResponse(status_code=404, content=NOT_FOUND_ERROR)
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content=GENERIC_ERROR)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=PORT)
