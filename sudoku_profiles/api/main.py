"""FastAPI application wiring."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from sudoku_profiles.api.routes import router
from sudoku_profiles.errors import CustomError
from sudoku_profiles.helpers.database_helpers import close_db, ping_db
from sudoku_profiles.utils.misc import get_version


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    yield
    await close_db()


app = FastAPI(
    title="Sudoku Profiles API",
    version=get_version(),
    lifespan=lifespan,
)
app.include_router(router)


@app.exception_handler(CustomError)
async def custom_error_handler(_: Request, exc: CustomError) -> JSONResponse:
    if exc.status_code < 500:
        logger.info(f"Rejected request ({exc.code.value}): {exc}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code.value, "detail": str(exc)},
    )


@app.get("/health")
async def health() -> JSONResponse:
    """Report whether the database answers."""
    if await ping_db():
        return JSONResponse({"status": "ok"})
    return JSONResponse({"status": "unavailable"}, status_code=503)
