"""
Main entry point for the LifePulse Health API.

This module initializes the FastAPI application, creates the database tables,
seeds sample data, sets up middleware and defines the global exception handlers.
"""

import logging
import time
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import models
from .config import settings
from .database import SessionLocal, engine
from .routes import appointments, auth, chat, companion, medicine, remedies, reminders, rewards, system, tracking, users
from .seed import seed_database

load_dotenv()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create all database tables defined in models.py if they don't exist
models.Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Loads the sample profile into an empty database on startup."""
    if settings.SEED_ON_STARTUP:
        db = SessionLocal()
        try:
            seed_database(db)
        finally:
            db.close()
    yield
    logger.info("Shutting down LifePulse Health API.")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Reminders, vitals tracking, wellness companion and token rewards for a single user.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for module in (auth, users, reminders, appointments, chat, remedies, tracking, medicine, rewards, companion, system):
    app.include_router(module.router, prefix=settings.API_PREFIX)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """
    Adds an `X-Process-Time` header to every response, indicating how long
    the request took to process.
    """
    start_time = time.time()
    response = await call_next(request)
    response.headers["X-Process-Time"] = str(time.time() - start_time)
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handles all `HTTPException`s to return a standardized JSON error message.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Reports malformed request bodies and parameters as 400 responses."""
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request data", "errors": errors},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


@app.get("/")
def read_root():
    """
    Root endpoint.
    Provides a simple health check to confirm the service is running.
    """
    return {"message": f"{settings.PROJECT_NAME} is running"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
