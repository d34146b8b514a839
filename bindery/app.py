import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bindery.database import engine, init_db
from bindery.errors import ApiError
from bindery.routers import authors, books, seed

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info("Database connected")
    yield
    await engine.dispose()


def _error_body(message: str, error: str | None = None) -> dict:
    return {"message": message, "error": error}


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message, exc.error))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    missing = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return JSONResponse(status_code=422, content=_error_body("Invalid request", missing))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=_error_body("Internal server error", str(exc)))


def create_app() -> FastAPI:
    app = FastAPI(title="Bindery", version="0.1.0", lifespan=lifespan)
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
    app.include_router(authors.router)
    app.include_router(books.router)
    app.include_router(seed.router)
    return app


app = create_app()
