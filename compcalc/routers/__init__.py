"""FastAPI routers for the compensation calculator."""

from .compensation import router as compensation_router

__all__ = ["compensation_router"]
