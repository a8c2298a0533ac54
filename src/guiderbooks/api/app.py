"""Application factory for the Guiderbooks FastAPI backend."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from guiderbooks.completion import CompletionClient
from guiderbooks.configuration import Settings, settings as default_settings
from guiderbooks.errors import ConfigurationError, GuiderbooksError
from guiderbooks.storage import MongoChapterStore, MongoQuestionStore, connect

from .routes import api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    cfg: Settings = app.state.settings
    database = connect(cfg.mongodb_uri, cfg.mongodb_db)
    if database is not None:
        await database.ping()
        app.state.chapter_store = MongoChapterStore(database.chapters)
        app.state.question_store = MongoQuestionStore(database.questions)
    try:
        yield
    finally:
        if database is not None:
            await database.close()
            logger.info("MongoDB connection closed")


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(GuiderbooksError)
    async def domain_error_handler(request: Request, exc: GuiderbooksError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: [%s] %s", request.method, request.url.path, exc.error_code, exc.message)
        else:
            logger.info("%s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
        message = exc.message
        if isinstance(exc, ConfigurationError):
            # the detailed cause stays in the logs
            message = "OpenAI API configuration error"
        return JSONResponse(status_code=exc.status_code, content={"error": message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        first = exc.errors()[0] if exc.errors() else {}
        field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
        detail = f"{field}: {first.get('msg')}" if field else "Invalid request body"
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": detail})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        debug = app.state.settings.debug
        message = str(exc) if debug else "Internal server error"
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": message})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application instance."""
    cfg = settings or default_settings
    logging.basicConfig(
        level=cfg.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="Guiderbooks API",
        description="Chapter Q&A, quiz generation and assessments backed by an LLM.",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.completion_client = CompletionClient(cfg.openai_api_key, cfg.llm_model)
    app.state.chapter_store = None
    app.state.question_store = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )
    _register_error_handlers(app)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return "Backend API is running"

    app.include_router(api_router, prefix="/api")

    return app
