"""
TextAssist - AI completion backend

FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from datetime import datetime
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from textassist.core.config import ProviderConfig, get_config, get_log_path, get_provider_config
from textassist.core.errors import register_exception_handlers
from textassist.core.logging import setup_logging, get_logger
from textassist.api import api_router

APP_NAME = "TextAssist"
APP_VERSION = "0.1.0"

# Record startup time globally
_startup_time = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Resolves configuration once on startup.
    """
    global _startup_time
    _startup_time = datetime.utcnow().isoformat()
    logger = setup_logging()
    logger.info("Starting %s...", APP_NAME)
    logger.debug("Log level: %s, log file: %s", get_config().logging.level, get_log_path())

    provider_config = get_provider_config()
    logger.info("AI provider: %s", provider_config.selector)

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title=f"{APP_NAME} API",
    description="Autocomplete suggestions, text completion and workflow step generation backed by a configurable AI provider",
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/api-docs",
)


# Request logging middleware (flow-wise: log each request and response)
@app.middleware("http")
async def log_requests(request, call_next):
    logger = get_logger()
    method = request.method
    path = request.url.path
    logger.debug("Request started: %s %s", method, path)
    response = await call_next(request)
    logger.debug("Request completed: %s %s -> %s", method, path, response.status_code)
    return response


# Allow all origins; the browser widget may be served from anywhere in development.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router)


@app.get("/")
async def root(config: ProviderConfig = Depends(get_provider_config)):
    """Service information."""
    return {
        "name": APP_NAME,
        "version": APP_VERSION,
        "provider": config.selector,
        "documentation": "/api-docs",
        "endpoints": [
            {"path": "/health", "method": "GET", "description": "Health check endpoint"},
            {
                "path": "/api/suggestions",
                "method": "POST",
                "description": "Autocomplete suggestions",
                "body": {"text": "string"},
            },
            {
                "path": "/ai/complete",
                "method": "POST",
                "description": "Respond to prompt",
                "body": {"prompt": "string"},
            },
            {
                "path": "/generate-step",
                "method": "POST",
                "description": "Generate next workflow step",
                "body": {"task": "string"},
            },
        ],
        "status": "running",
    }


@app.get("/health")
async def health_check(config: ProviderConfig = Depends(get_provider_config)):
    """Health check endpoint with startup time."""
    return {
        "status": "healthy",
        "provider": config.selector,
        "startup_time": _startup_time,
        "timestamp": datetime.utcnow().isoformat(),
    }


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    uvicorn.run(
        "main:app",
        host=config.server.host,
        port=config.server.port,
        reload=config.server.debug,
    )
