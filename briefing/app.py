"""
FastAPI application for the News Briefing proxy.

Exposes the summarize endpoint used by the dashboard, the dashboard page
itself and a health check.
"""

import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from pydantic import BaseModel

from briefing.config import Settings, load_settings
from briefing.errors import BriefingError, SummarizationError
from briefing.services.briefing import BriefingService
from briefing.services.cache import SummaryCache, format_timestamp, utc_now
from briefing.services.llm import LLMService

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "Failed to generate AI summary. Check server logs."


class SummarizeRequest(BaseModel):
    htmlContent: Optional[str] = None


class SummaryResponse(BaseModel):
    summary: str
    timestamp: str
    isCached: bool


class ErrorResponse(BaseModel):
    error: str


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(
    settings: Optional[Settings] = None,
    cache: Optional[SummaryCache] = None,
    llm: Optional[LLMService] = None,
) -> FastAPI:
    """Builds the app; collaborators can be injected for tests."""
    settings = settings or load_settings()
    cache = cache or SummaryCache(settings.cache_file, settings.cache_ttl_hours)
    llm = llm or LLMService(
        settings.api_key,
        model=settings.model,
        max_output_tokens=settings.max_output_tokens,
    )

    app = FastAPI(title="News Briefing Proxy")
    app.state.settings = settings
    app.state.briefing = BriefingService(cache, llm)

    @app.exception_handler(BriefingError)
    async def briefing_error_handler(request: Request, exc: BriefingError):
        if isinstance(exc, SummarizationError):
            # Provider detail stays in the server log.
            return _error(exc.status_code, GENERIC_FAILURE)
        return _error(exc.status_code, str(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        logger.info("Rejected malformed request to %s: %s", request.url.path, exc)
        return _error(400, "Request body must be JSON with an htmlContent string.")

    @app.get("/")
    def dashboard():
        index_file = app.state.settings.index_file
        if not os.path.isfile(index_file):
            return _error(404, "Dashboard page not found.")
        return FileResponse(index_file, media_type="text/html")

    @app.post(
        "/api/summarize-news",
        response_model=SummaryResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    def summarize_news(body: Optional[SummarizeRequest] = None):
        return app.state.briefing.summarize(body.htmlContent if body else None)

    @app.get("/healthz")
    def healthz():
        return {
            "status": "ok",
            "time": format_timestamp(utc_now()),
        }

    return app
