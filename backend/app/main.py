"""FastAPI application entry point. Registers middleware, error handlers and API routers."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.config import settings
from app.database import Base, engine
from app.errors import DomainError, domain_error_handler
import app.models  # noqa: F401 - registers model metadata
from app.routers import (
    auth, batches, coaches, coach_assignments, attendance, enrollments,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

app = FastAPI(
    title="Sports Coaching Attendance Service",
    description="Coach-to-batch assignment, per-session attendance and student progress",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(DomainError, domain_error_handler)

# Register all routers
app.include_router(auth.router)
app.include_router(batches.router)
app.include_router(coaches.router)
app.include_router(coach_assignments.router)
app.include_router(attendance.router)
app.include_router(enrollments.router)


@app.on_event("startup")
def ensure_schema():
    # create tables that are missing on first boot
    Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "Sports Coaching Attendance Service"}
