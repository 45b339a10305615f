"""FastAPI backend for promptcore."""

from promptcore.api.main import app
from promptcore.api.routes import router

__all__ = [
    "app",
    "router",
]
