# app/main.py
import time
import logging
import uuid
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from app.errors import DomainError
from app.routers.workouts import router as workouts_router
from app.routers.prescriptions import router as prescriptions_router
from app.routers.sessions import router as sessions_router
from app.routers.blocks import router as blocks_router
from app.routers.exercise_logs import router as exercise_logs_router
from app.routers.sets import router as sets_router
from app.db import SessionLocal  # for healthz DB check
from app.settings import get_settings

log = logging.getLogger("uvicorn")
settings = get_settings()

app = FastAPI(
    title="LiftLog API",
    openapi_tags=[
        {"name": "workouts", "description": "Workout templates"},
        {"name": "prescriptions", "description": "Prescription groups and their exercises"},
        {"name": "sessions", "description": "Workout sessions instantiated from templates"},
        {"name": "blocks", "description": "Per-group blocks inside a session"},
        {"name": "exercise-logs", "description": "Per-exercise logs inside a block"},
        {"name": "sets", "description": "Performed sets"},
    ],
)


# CORS (relax for local dev; tighten origins in prod via env)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS.split(","),
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

@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    return JSONResponse({"detail": exc.detail}, status_code=exc.status_code)

@app.get("/")
def root():
    return {"ok": True, "name": "LiftLog API"}

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
    return {"version": settings.API_VERSION}

# Routers
app.include_router(workouts_router)
app.include_router(prescriptions_router)
app.include_router(sessions_router)
app.include_router(blocks_router)
app.include_router(exercise_logs_router)
app.include_router(sets_router)
