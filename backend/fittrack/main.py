# fittrack/main.py
import time
import uuid
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text

from fittrack.routers.auth import router as auth_router
from fittrack.routers.users import router as users_router
from fittrack.routers.workouts import router as workouts_router
from fittrack.routers.groups import router as groups_router
from fittrack.db import SessionLocal  # for healthz DB check
from fittrack.settings import get_settings
from fittrack.logger import get_logger

log = get_logger("fittrack.http")
settings = get_settings()

app = FastAPI(
    title="FitTrack API",
    openapi_tags=[
        {"name": "auth", "description": "Registration & login"},
        {"name": "users", "description": "Profile and derived score"},
        {"name": "workouts", "description": "Workouts and their exercises"},
        {"name": "groups", "description": "Groups, join codes and leaderboards"},
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

@app.get("/")
def root():
    return {"ok": True, "name": "FitTrack API"}

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
        log.warning("healthz degraded: %s", e)
        return {"status": "degraded", "error": str(e)}

@app.get("/version")
def version():
    return {"version": settings.API_VERSION}

# Routers
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(workouts_router)
app.include_router(groups_router)
