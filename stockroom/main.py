"""FastAPI application entrypoint. No business logic; only wiring, middleware and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stockroom.api.v1 import router as v1_router
from stockroom.core.config import settings
from stockroom.core.database import create_tables
from stockroom.core.errors import NotInitialized, StorageFailure

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    if settings.APP_ENV == "dev" and settings.STORAGE_BACKEND == "sql":
        create_tables()
    yield


app = FastAPI(
    title="Stockroom API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(v1_router, prefix=settings.API_V1_PREFIX)


@app.exception_handler(StorageFailure)
async def storage_failure_handler(_request: Request, exc: StorageFailure) -> JSONResponse:
    logger.error("Storage failure: %s", exc.message)
    return JSONResponse(status_code=503, content={"detail": exc.message})


@app.exception_handler(NotInitialized)
async def not_initialized_handler(_request: Request, exc: NotInitialized) -> JSONResponse:
    logger.error("Service not initialized: %s", exc.message)
    return JSONResponse(status_code=500, content={"detail": exc.message})


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Stockroom API"}
