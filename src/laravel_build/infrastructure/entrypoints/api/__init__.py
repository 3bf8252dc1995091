from .app_factory import create_app
from .build_router import router as build_router
from .health_router import router as health_router

__all__ = ["create_app", "build_router", "health_router"]
