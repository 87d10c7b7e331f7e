# logbook/main.py
import os
import time
import logging
import uuid
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from logbook.routers.sessions import router as sessions_router
from logbook.routers.sets import router as sets_router
from logbook.routers.stats import router as stats_router
from logbook.routers.program import router as program_router
from logbook.routers.backup import router as backup_router
from logbook.routers.tools import router as tools_router
from logbook.db import SessionLocal, init_db  # SessionLocal for healthz DB check
from logbook.settings import get_settings

log = logging.getLogger("uvicorn")

@asynccontextmanager
async def lifespan(_app: FastAPI):
    if get_settings().AUTO_CREATE_SCHEMA:
        init_db()
        log.info("schema ready")
    yield

app = FastAPI(
    title="Logbook API",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "sessions", "description": "Workout sessions and their sets"},
        {"name": "sets", "description": "Set lookups and history"},
        {"name": "stats", "description": "PRs, suggestions, snapshot, bodyweight"},
        {"name": "program", "description": "Training program catalog"},
        {"name": "backup", "description": "JSON export and restore"},
        {"name": "tools", "description": "Plate calculator"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
ALLOW_ORIGINS = os.getenv("ALLOW_ORIGINS", "*").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOW_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def add_request_id_and_log(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Request-ID"] = req_id
    log.info("rid=%s %s %s -> %s in %.1fms",
             req_id, request.method, request.url.path, response.status_code, duration_ms)
    return response

@app.get("/")
def root():
    return {"ok": True, "name": "Logbook API"}

@app.get("/ping")
def ping():
    return {"pong": True}

@app.get("/healthz")
def healthz():
    # Quick DB sanity check
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": os.getenv("API_VERSION", "dev")}

# Routers
app.include_router(sessions_router)
app.include_router(sets_router)
app.include_router(stats_router)
app.include_router(program_router)
app.include_router(backup_router)
app.include_router(tools_router)
