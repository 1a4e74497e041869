# bookstore/main.py
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException
from . import config, models  # noqa: F401 (модели регистрируют таблицы в Base.metadata)
from .api import authors, books
from .database import Base, engine
from .responses import respond_error

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Bookstore API started")
    yield
    await engine.dispose()
    logger.info("Bookstore API stopped")


app = FastAPI(
    title="Bookstore API",
    description="A small JSON API over a catalogue of authors and their books.",
    version="1.0.0",
    lifespan=lifespan,
    redirect_slashes=False,
)

# ПОДКЛЮЧАЕМ РОУТЕРЫ
app.include_router(authors.router, prefix="/api/v1")
app.include_router(books.router, prefix="/api/v1")


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return respond_error(exc.status_code, str(exc.detail), headers=exc.headers)


def run():
    uvicorn.run("bookstore.main:app", host=config.API_HOST, port=config.API_PORT)
