"""
AMA — FastAPI application entry-point.

Run with:
    uvicorn ama.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ama.config import settings
from ama.database import Base, engine
from ama.errors import AMAError

# ── Import models so metadata is populated, then routers ──
import ama.models  # noqa: F401
from ama.routers import amas, answers, questions, votes

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


# ── Lifespan: create tables on startup ──
@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("%s started", settings.APP_NAME)
    yield
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    description="Link-based AMA sessions: ask, vote, answer, digest.",
    version="0.1.0",
    lifespan=lifespan,
)


# ── Error mapping ──
def _route_template(request: Request) -> str:
    # The template, not the URL: URLs carry capability tokens.
    route = request.scope.get("route")
    return getattr(route, "path", "-")


@app.exception_handler(AMAError)
async def ama_error_handler(request: Request, exc: AMAError) -> JSONResponse:
    """Map a domain error to its status; wrong-token and not-found share one body."""
    logger.info(
        "%s %s rejected: %s: %s",
        request.method, _route_template(request), type(exc).__name__, exc,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.public_detail, "kind": exc.kind},
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, _route_template(request), exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


# ── Register API routers ──
app.include_router(amas.router)
app.include_router(questions.router)
app.include_router(votes.router)
app.include_router(answers.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
