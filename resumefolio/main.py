import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .config import settings
from .database import create_tables
from .core.logger import logger
from .core.errors import register_exception_handlers
from .routes import auth_router, resume_router, templates_router

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_tables()
    logger.info("Application started successfully")
    yield
    logger.info("Application shutting down")

app = FastAPI(title="resumefolio", lifespan=lifespan, debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

static_path = os.path.join(os.path.dirname(__file__), "..", "front", "static")
if os.path.isdir(static_path):
    app.mount("/static", StaticFiles(directory=static_path), name="static")

app.include_router(auth_router)
app.include_router(resume_router)
app.include_router(templates_router)
