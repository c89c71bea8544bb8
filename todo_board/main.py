"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings, load_settings
from .logging_setup import setup_logging
from .models import HealthResponse
from .routers import tasks
from .store import TaskStore

logger = logging.getLogger(__name__)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as ``{"error": ...}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies are client errors, reported as 400."""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message},
    )


def create_app(settings: Settings | None = None, store: TaskStore | None = None) -> FastAPI:
    """Build the application around an explicitly owned store."""
    settings = settings or load_settings()
    if store is None:
        store = TaskStore() if settings.seed else TaskStore(seed=None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Serving %d tasks on port %d", len(app.state.store), settings.port)
        yield

    app = FastAPI(
        title="TODO Board",
        description="In-memory task store for the to-do board",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(tasks.router)

    @app.get("/api/health", response_model=HealthResponse)
    def health(request: Request):
        """Report liveness and the number of stored tasks."""
        return HealthResponse(status="ok", count=len(request.app.state.store))

    return app


app = create_app()


def main():
    """Run the application with uvicorn."""
    import uvicorn

    settings = load_settings()
    setup_logging(settings.log_level)
    uvicorn.run(
        "todo_board.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
