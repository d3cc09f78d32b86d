"""FastAPI application entry point."""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from todo_api.config import get_settings
from todo_api.database import init_db, engine
from todo_api.api import api_router
from todo_api.exceptions import InternalError, NotFoundError, TodoAPIError

settings = get_settings()
logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

ENDPOINTS = [
    ("POST", "/api/auth/register", "Register new user"),
    ("POST", "/api/auth/login", "Login user"),
    ("GET", "/api/auth/me", "Get current user"),
    ("GET", "/api/todos", "Get user's todos"),
    ("POST", "/api/todos", "Create new todo"),
    ("PUT", "/api/todos/{id}", "Update todo"),
    ("DELETE", "/api/todos/{id}", "Delete todo"),
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    await init_db()
    logger.info("%s starting; available endpoints:", settings.app_name)
    for method, path, description in ENDPOINTS:
        logger.info("  %-6s %-20s %s", method, path, description)
    yield
    # Shutdown
    await engine.dispose()
    logger.info("%s stopped", settings.app_name)


def error_response(status_code: int, message: str, headers: dict = None) -> JSONResponse:
    """Build an ``{"error": ...}`` response carrying the CORS headers."""
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers={**CORS_HEADERS, **(headers or {})},
    )


async def request_boundary(request: Request, call_next):
    """
    Outermost request handling.

    Preflight requests on any path are answered here without routing. Every
    other response gets the CORS headers, and any exception that escapes the
    routes becomes a generic 500.
    """
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("Error processing %s %s", request.method, request.url.path)
        error = InternalError()
        return error_response(error.status_code, error.detail)
    response.headers.update(CORS_HEADERS)
    return response


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        # unsupported method on a known path is reported like an unknown route
        return error_response(NotFoundError.status_code, NotFoundError.message)
    if exc.status_code == status.HTTP_404_NOT_FOUND and not isinstance(exc, TodoAPIError):
        # router misses carry Starlette's own "Not Found" detail
        return error_response(NotFoundError.status_code, NotFoundError.message)
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        # loc starts with where the value came from: body, path or query
        field = ".".join(str(part) for part in first.get("loc", ())[1:])
        message = f"Invalid {field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


def create_app() -> FastAPI:
    """Build the application with routes, CORS and error handling wired in."""
    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        description="Todo API - per-user task lists with token authentication",
        lifespan=lifespan,
    )

    app.middleware("http")(request_boundary)

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Include API routes
    app.include_router(api_router, prefix="/api")

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    return app


app = create_app()
