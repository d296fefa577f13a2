import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .database import init_db
from .errors import AppError
from .api.routes import (
    achievements, badges, chat, mentors, profiles, quizzes, resumes,
    translate, users, voice_records,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # Init DB tables on startup
    init_db()
    yield


app = FastAPI(
    title="LingoMentor API",
    description="Multilingual mentoring: users, quizzes, badges, resumes, translated chat",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users.router,         prefix="/api/users",         tags=["Users"])
app.include_router(profiles.router,      prefix="/api/profiles",      tags=["Profiles"])
app.include_router(achievements.router,  prefix="/api/achievements",  tags=["Achievements"])
app.include_router(badges.router,        prefix="/api/badges",        tags=["Badges"])
app.include_router(quizzes.router,       prefix="/api/quizzes",       tags=["Quizzes"])
app.include_router(voice_records.router, prefix="/api/voice-records", tags=["Voice"])
app.include_router(voice_records.upload_router, prefix="/api/voice-upload", tags=["Voice"])
app.include_router(resumes.router,       prefix="/api/resumes",       tags=["Resumes"])
app.include_router(chat.router,          prefix="/api/chat",          tags=["Chat"])
app.include_router(mentors.router,       prefix="/api/mentors",       tags=["Mentors"])
app.include_router(translate.router,     prefix="/api/translate",     tags=["Translate"])


# ── Error rendering: every failure is {"error": ...} ───────────────────────

@app.exception_handler(AppError)
async def app_error_handler(_request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s: %s", type(exc).__name__, exc.to_body())
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def _field_name(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "form")]
    return ".".join(parts) or "request"


def describe_validation_errors(errors: list[dict]) -> str:
    missing = [_field_name(e["loc"]) for e in errors if e.get("type") == "missing"]
    if missing:
        return "Missing required fields: " + ", ".join(missing)
    first = errors[0]
    if first.get("type") == "extra_forbidden":
        return f"Unknown field: {_field_name(first['loc'])}"
    return f"Invalid value for {_field_name(first['loc'])}: {first.get('msg', 'invalid')}"


@app.exception_handler(RequestValidationError)
async def request_validation_handler(_request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = describe_validation_errors(errors) if errors else "Invalid request"
    logger.warning("Rejected request: %s", message)
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(_request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(SQLAlchemyError)
async def db_error_handler(_request: Request, exc: SQLAlchemyError):
    logger.exception("Unhandled database error", exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


@app.get("/")
def root():
    return {
        "name": "LingoMentor API",
        "version": "0.1.0",
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "users":         "/api/users",
            "profiles":      "/api/profiles",
            "achievements":  "/api/achievements",
            "badges":        "/api/badges",
            "quizzes":       "/api/quizzes",
            "voice_records": "/api/voice-records",
            "voice_upload":  "/api/voice-upload",
            "resumes":       "/api/resumes",
            "chat":          "/api/chat",
            "mentors":       "/api/mentors",
            "translate":     "/api/translate",
        },
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
