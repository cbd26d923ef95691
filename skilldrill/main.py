# skilldrill/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from skilldrill.api import admin, ai, drills, sessions, skill_drills, skills, stats, users
from skilldrill.config import settings
from skilldrill.database import Base, engine
from skilldrill.exceptions import SkillDrillError
from skilldrill.services.drafting_service import build_drafting_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    # Create database tables (migrations are managed by alembic in production)
    Base.metadata.create_all(bind=engine)
    app.state.drafting_client = build_drafting_client(settings)
    logger.info("SkillDrill API started (env=%s)", settings.APP_ENV)
    yield


# Initialize FastAPI app
app = FastAPI(title="SkillDrill API", debug=settings.DEBUG, lifespan=lifespan)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(SkillDrillError)
async def skilldrill_error_handler(request: Request, exc: SkillDrillError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# API routers
app.include_router(users.router)         # /users/*
app.include_router(skills.router)        # /skills/*
app.include_router(drills.router)        # /drills/*
app.include_router(sessions.router)      # /sessions/*
app.include_router(stats.router)         # /stats/*
app.include_router(ai.router)            # /ai/*
app.include_router(skill_drills.router)  # /skill-drills/*
app.include_router(admin.router)         # /admin/*


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "message": "SkillDrill API is running",
        "version": "0.1.0",
    }
