from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api import api_router
from .config import Settings, ensure_data_dir, load_settings
from .database import init_database, close_database, is_database_open
from .exceptions import FinanceTrackerError, ValidationError
from .logger import setup_logging, get_logger


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application. Settings are loaded from the data directory if not given."""
    settings = settings or load_settings()
    logger = get_logger()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle startup and shutdown events."""
        ensure_data_dir(settings.data_dir)
        setup_logging(settings)
        if not is_database_open():
            init_database(settings.database_url)
        yield
        # Cleanup on shutdown
        close_database()

    app = FastAPI(
        title="Finance Tracker",
        description="Personal income, expense and budget tracking",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS for local development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(FinanceTrackerError)
    async def handle_finance_error(request: Request, exc: FinanceTrackerError):
        """Turn service errors into JSON responses."""
        body = {"detail": exc.message}
        if isinstance(exc, ValidationError):
            body["field"] = exc.field
        logger.debug("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content=body)

    # API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()
