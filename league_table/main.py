import logging
import uuid

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from league_table.core.config import settings
from league_table.core.errors import (
    DecodeError,
    FetchError,
    LeagueTableError,
    RenderTargetMissing,
)
from league_table.routers import standings
from league_table.services.page_service import render_standings_page
from league_table.services.standings_service import SeasonFetcher, get_fetcher

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="league-table", version="0.1.0")
app.include_router(standings.router)

# ---------------------------------------------------------------------------
# Middleware: request-id injection
# ---------------------------------------------------------------------------


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


# ---------------------------------------------------------------------------
# Global exception handlers
# ---------------------------------------------------------------------------


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "unknown")


PIPELINE_ERROR_STATUS = {
    FetchError: 502,
    DecodeError: 502,
    RenderTargetMissing: 500,
}


@app.exception_handler(LeagueTableError)
async def pipeline_error_handler(request: Request, exc: LeagueTableError):
    status_code = PIPELINE_ERROR_STATUS.get(type(exc), 500)
    logger.warning(
        "Standings pipeline failed: %s", exc.message,
        extra={"request_id": _request_id(request)},
    )
    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.code,
            "message": exc.message,
            "detail": exc.details if settings.DEBUG else None,
            "request_id": _request_id(request),
        },
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=422,
        content={
            "error": "validation_error",
            "message": "Request validation failed",
            "detail": exc.errors(include_url=False),
            "request_id": _request_id(request),
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": "http_error",
            "message": str(exc.detail),
            "detail": None,
            "request_id": _request_id(request),
        },
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception", extra={"request_id": _request_id(request)})
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
            "detail": str(exc) if settings.DEBUG else None,
            "request_id": _request_id(request),
        },
    )


# ---------------------------------------------------------------------------
# Public endpoints
# ---------------------------------------------------------------------------


@app.get("/health")
async def health():
    return {"status": "healthy", "service": "league-table", "version": "0.1.0"}


# ---------------------------------------------------------------------------
# Rendered table pages
# ---------------------------------------------------------------------------


@app.get("/", response_class=HTMLResponse)
async def read_root(fetcher: SeasonFetcher = Depends(get_fetcher)):
    return await render_standings_page(settings.DEFAULT_SEASON, fetcher=fetcher)


@app.get("/seasons/{season}", response_class=HTMLResponse)
async def read_season(season: str, fetcher: SeasonFetcher = Depends(get_fetcher)):
    return await render_standings_page(season, fetcher=fetcher)
