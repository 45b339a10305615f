"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from promptcore import __version__
from promptcore.api.routes import router
from promptcore.utils.config import get_settings
from promptcore.utils.logger import get_logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    setup_logging(level=settings.log_level, log_file=settings.log_file)

    key_status = settings.validate_api_keys()
    missing_keys = [k for k, v in key_status.items() if not v]
    if missing_keys:
        get_logger().warning(
            f"Missing API keys for: {', '.join(missing_keys)}. Generation requests will fail."
        )

    yield


app = FastAPI(
    title="promptcore",
    description="Prompt templates for code-assistant tasks",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "promptcore",
        "description": "Prompt templates for code-assistant tasks",
        "version": __version__,
        "endpoints": {
            "generate": "POST /api/generate",
            "preview": "POST /api/prompts/preview",
            "prompt_kinds": "GET /api/prompts",
            "models": "GET /api/models",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    settings = get_settings()
    return {
        "status": "healthy",
        "api_keys": settings.validate_api_keys(),
    }


def run() -> None:
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "promptcore.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
