import time
import tracemalloc
from contextlib import asynccontextmanager

try:
    import resource
except ImportError:  # not available on Windows
    resource = None

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from wingo import __version__
from wingo.api.routes import now_iso, router
from wingo.api.schemas import HealthOut
from wingo.config import settings

SERVICE_NAME = "WinGo 1M AI Prediction API"
ENDPOINTS = ["/", "/api/predict", "/health"]
_started = time.monotonic()

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{SERVICE_NAME} {__version__} online on port {settings.port}")
    yield
    logger.info("Shutting down")

app = FastAPI(title=SERVICE_NAME, version=__version__, lifespan=lifespan)
app.include_router(router)

@app.exception_handler(StarletteHTTPException)
async def not_found(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={
            "error": "Endpoint not found",
            "available_endpoints": ENDPOINTS,
        })
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail},
                        headers=getattr(exc, "headers", None))

@app.get("/")
def home():
    return {
        "status": "✅ ONLINE",
        "service": SERVICE_NAME,
        "version": __version__,
        "description": "Weighted-vote ensemble over 100+ heuristic models",
        "endpoints": {
            "predict": "GET /api/predict",
            "health": "GET /health",
        },
    }

def memory_usage() -> dict[str, int]:
    usage = {}
    if resource is not None:
        usage["max_rss_kb"] = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    if tracemalloc.is_tracing():
        cur, peak = tracemalloc.get_traced_memory()
        usage["traced_current"] = cur
        usage["traced_peak"] = peak
    return usage

@app.get("/health", response_model=HealthOut)
def health():
    return {
        "status": "healthy",
        "uptime_seconds": int(time.monotonic() - _started),
        "memory_usage": memory_usage(),
        "timestamp": now_iso(),
    }
