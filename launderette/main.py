"""FastAPI application entry point."""

import logging

from dotenv import load_dotenv

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

# Load environment variables from .env file
load_dotenv()

from launderette.api.endpoints import sitemap
from launderette.api.routes import router
from launderette.core.config import Settings, settings as default_settings
from launderette.core.errors import DirectoryError
from launderette.core.security import FirebaseTokenVerifier, TokenVerifier
from launderette.db.init_db import init_db
from launderette.db.session import build_engine, build_session_factory
from launderette.db.store import DocumentNotFound, RecordStore
from launderette.services.geocoding import Geocoder

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format="%(asctime)s %(levelname)s %(message)s")


def _error(status_code: int, message: str, details=None) -> JSONResponse:
    body = {"error": message}
    if details is not None:
        body["details"] = jsonable_encoder(details)
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error(400, "Invalid data", exc.errors())

    @app.exception_handler(DirectoryError)
    async def directory_error(request: Request, exc: DirectoryError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(DocumentNotFound)
    async def document_not_found(request: Request, exc: DocumentNotFound) -> JSONResponse:
        return _error(404, "Document not found")

    @app.exception_handler(HTTPException)
    async def http_error(request: Request, exc: HTTPException) -> JSONResponse:
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(500, "Internal server error")


def create_app(
    settings: Settings | None = None,
    store: RecordStore | None = None,
    token_verifier: TokenVerifier | None = None,
    geocoder: Geocoder | None = None,
) -> FastAPI:
    """Build the application with explicitly constructed dependencies."""
    settings = settings or default_settings
    configure_logging(settings.log_level)

    engine = None
    if store is None:
        engine = build_engine(str(settings.database_url))
        store = RecordStore(build_session_factory(engine))

    app = FastAPI(title=settings.project_name)
    app.state.settings = settings
    app.state.store = store
    app.state.token_verifier = token_verifier or FirebaseTokenVerifier(
        settings.firebase_project_id, settings.admin_emails
    )
    app.state.geocoder = geocoder or Geocoder(
        settings.geocoder_url, settings.geocoder_user_agent, settings.geocoder_timeout
    )

    app.include_router(router, prefix=settings.api_prefix)
    app.include_router(sitemap.router)
    register_error_handlers(app)

    @app.on_event("startup")
    def on_startup() -> None:
        """Initialize database artifacts."""
        if engine is not None:
            init_db(engine)

    @app.on_event("shutdown")
    def on_shutdown() -> None:
        if engine is not None:
            engine.dispose()

    @app.get("/", tags=["root"])
    async def root() -> dict[str, str]:
        """Basic sanity endpoint."""
        return {"message": f"{settings.project_name} is running"}

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        """Health check endpoint for Docker."""
        return {"status": "healthy"}

    return app


app = create_app()
